"""Particle integration laid out as objects (AoS) and as parallel arrays (SoA)."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, fields


@dataclass(slots=True)
class Particle:
    """A single particle with position, velocity and acceleration."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0
    ax: float = 0.0
    ay: float = 0.0
    az: float = 0.0


@dataclass
class ParticleSystem:
    """Particles stored as one list per component."""

    x: list[float] = field(default_factory=list)
    y: list[float] = field(default_factory=list)
    z: list[float] = field(default_factory=list)
    vx: list[float] = field(default_factory=list)
    vy: list[float] = field(default_factory=list)
    vz: list[float] = field(default_factory=list)
    ax: list[float] = field(default_factory=list)
    ay: list[float] = field(default_factory=list)
    az: list[float] = field(default_factory=list)

    @classmethod
    def create(cls, count: int) -> ParticleSystem:
        """Return a system of ``count`` particles with every component zero."""
        return cls(**{f.name: [0.0] * count for f in fields(cls)})

    def __len__(self) -> int:
        return len(self.x)


def make_particles(count: int) -> list[Particle]:
    """Return ``count`` particles seeded with the benchmark's initial state."""
    return [
        Particle(
            x=i * 0.001,
            y=i * 0.002,
            z=i * 0.003,
            vx=1.0,
            vy=2.0,
            vz=3.0,
            ax=0.1,
            ay=0.2,
            az=0.3,
        )
        for i in range(count)
    ]


def _seeded_system(count: int) -> ParticleSystem:
    return ParticleSystem(
        x=[i * 0.001 for i in range(count)],
        y=[i * 0.002 for i in range(count)],
        z=[i * 0.003 for i in range(count)],
        vx=[1.0] * count,
        vy=[2.0] * count,
        vz=[3.0] * count,
        ax=[0.1] * count,
        ay=[0.2] * count,
        az=[0.3] * count,
    )


def integrate_velocity_oop(particles: Iterable[Particle], dt: float) -> None:
    """Advance each particle's velocity by its acceleration over ``dt``."""
    for p in particles:
        p.vx += p.ax * dt
        p.vy += p.ay * dt
        p.vz += p.az * dt


def integrate_position_oop(particles: Iterable[Particle], dt: float) -> None:
    """Advance each particle's position by its velocity over ``dt``."""
    for p in particles:
        p.x += p.vx * dt
        p.y += p.vy * dt
        p.z += p.vz * dt


def render_oop(particles: Iterable[Particle]) -> float:
    """Return a weighted sum that reads only positions."""
    return sum(p.x * 0.1 + p.y * 0.2 + p.z * 0.3 for p in particles)


def integrate_velocity_soa(system: ParticleSystem, dt: float) -> None:
    """Advance all velocities by their accelerations over ``dt``."""
    system.vx[:] = [v + a * dt for v, a in zip(system.vx, system.ax)]
    system.vy[:] = [v + a * dt for v, a in zip(system.vy, system.ay)]
    system.vz[:] = [v + a * dt for v, a in zip(system.vz, system.az)]


def integrate_position_soa(system: ParticleSystem, dt: float) -> None:
    """Advance all positions by their velocities over ``dt``."""
    system.x[:] = [p + v * dt for p, v in zip(system.x, system.vx)]
    system.y[:] = [p + v * dt for p, v in zip(system.y, system.vy)]
    system.z[:] = [p + v * dt for p, v in zip(system.z, system.vz)]


def render_soa(system: ParticleSystem) -> float:
    """Return a weighted sum that reads only the position arrays."""
    return sum(
        x * 0.1 + y * 0.2 + z * 0.3 for x, y, z in zip(system.x, system.y, system.z)
    )


@dataclass(frozen=True)
class BenchmarkResult:
    """Checksums and timings of one AoS versus SoA run."""

    oop_sum: float
    soa_sum: float
    oop_ms: float
    soa_ms: float

    @property
    def speedup(self) -> float:
        return self.oop_ms / self.soa_ms if self.soa_ms else float("inf")


def _time_ms(work: Callable[[], float]) -> tuple[float, float]:
    start = time.perf_counter()
    result = work()
    return result, (time.perf_counter() - start) * 1000.0


def run_benchmark(
    count: int = 200_000,
    physics_steps: int = 200,
    render_steps: int = 5_000,
    dt: float = 0.016,
) -> BenchmarkResult:
    """Run the physics and render workload on both layouts and time each."""
    particles = make_particles(count)
    system = _seeded_system(count)

    def oop_work() -> float:
        for _ in range(physics_steps):
            integrate_velocity_oop(particles, dt)
            integrate_position_oop(particles, dt)
        return sum(render_oop(particles) for _ in range(render_steps))

    def soa_work() -> float:
        for _ in range(physics_steps):
            integrate_velocity_soa(system, dt)
            integrate_position_soa(system, dt)
        return sum(render_soa(system) for _ in range(render_steps))

    oop_sum, oop_ms = _time_ms(oop_work)
    soa_sum, soa_ms = _time_ms(soa_work)
    return BenchmarkResult(oop_sum, soa_sum, oop_ms, soa_ms)


def main(argv: list[str] | None = None) -> int:
    """Run the layout benchmark and print checksums and timings."""
    parser = argparse.ArgumentParser(description="Compare AoS and SoA particle updates.")
    parser.add_argument("--count", type=int, default=200_000)
    parser.add_argument("--physics-steps", type=int, default=200)
    parser.add_argument("--render-steps", type=int, default=5_000)
    parser.add_argument("--dt", type=float, default=0.016)
    args = parser.parse_args(argv)

    result = run_benchmark(args.count, args.physics_steps, args.render_steps, args.dt)
    print(f"Check sums: OOP={result.oop_sum:g} DOP={result.soa_sum:g}")
    print(f"OOP time: {result.oop_ms:.0f} ms")
    print(f"DOP time: {result.soa_ms:.0f} ms")
    print(f"DOP is {result.speedup:g}x faster")
    return 0
# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Generic, Tuple

from springanim.models.base import T
from springanim.models.spring import DEFAULT_FRICTION, DEFAULT_SPRING
from springanim.solvers.kernels import spring_rk4_deltas


@dataclass(frozen=True)
class SpringIntegrator(Generic[T]):
    """Classical RK4 for a damped spring with unit mass.

    Advances x'' = -spring * x - friction * v, written as the first-order
    pair dx/dt = v, dv/dt = a(x, v). Works on any vector quantity: floats,
    numpy arrays, or a user type with +, unary - and scalar *.

    The instance holds only the two constants and is never mutated; the
    caller owns (position, velocity) and adds the returned deltas itself.
    Neither constant nor dt is validated. A dt that is large compared to
    1/sqrt(spring) makes the explicit scheme diverge.
    """

    spring: float = DEFAULT_SPRING
    friction: float = DEFAULT_FRICTION

    def acceleration(self, position: T, velocity: T) -> T:
        return (-self.spring) * position + (-self.friction) * velocity

    def integrate(self, position: T, velocity: T, dt: float) -> Tuple[T, T]:
        """Return (delta_position, delta_velocity) over one step of length dt.

        Stage velocities are fed back as the velocity argument of the next
        stage's acceleration, so position and velocity are advanced as one
        coupled system.
        """
        a = self.acceleration
        half_dt = 0.5 * dt

        dp1 = velocity
        dv1 = a(position, velocity)

        dp2 = velocity + half_dt * dv1
        dv2 = a(position + half_dt * dp1, dp2)

        dp3 = velocity + half_dt * dv2
        dv3 = a(position + half_dt * dp2, dp3)

        dp4 = velocity + dt * dv3
        dv4 = a(position + dt * dp3, dp4)

        sixth = dt / 6.0
        dpdt = sixth * (dp1 + 2 * (dp2 + dp3) + dp4)
        dvdt = sixth * (dv1 + 2 * (dv2 + dv3) + dv4)
        return dpdt, dvdt

    def integrate_array(self, position, velocity, dt):
        """Batched float64 form of `integrate`, compiled with numba.

        Takes arrays of any matching shape, e.g. (n_values,) or
        (n_points, 2), and returns two new arrays of that shape.
        """
        return spring_rk4_deltas(position, velocity, dt,
                                 self.spring, self.friction)

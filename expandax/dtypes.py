"""Local dtype policy for expandax coordinates."""

import jax.numpy as jnp

# Angular comparisons are tolerance-sensitive; keep coordinates in double.
COORD_DTYPE = jnp.float64


def result_coord_dtype(*values):
    """Return the floating dtype shared by ``values``.

    Integer inputs are promoted to :data:`COORD_DTYPE` so that infinities
    and fractional wraparound arithmetic stay representable.
    """
    dtype = jnp.result_type(*values)
    if not jnp.issubdtype(dtype, jnp.floating):
        return COORD_DTYPE
    return dtype


__all__ = ["COORD_DTYPE", "result_coord_dtype"]

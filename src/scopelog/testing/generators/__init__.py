"""Testing generators – deterministic ids."""
from scopelog.testing.generators.id_gen import sequential_ids

__all__ = ["sequential_ids"]

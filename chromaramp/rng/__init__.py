from .hashing import hash_seed, coerce_seed, Seed
from .seeded import SeededRNG

__all__ = ["SeededRNG", "hash_seed", "coerce_seed", "Seed"]

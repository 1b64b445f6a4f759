"""Binary-field arithmetic, universal hashes, seed-tree opening and constraint builders for VOLE-based zero-knowledge proofs."""

__version__ = "0.1.0"

__all__ = ["binfield", "gf256", "poly", "univhash", "vectorcom", "product", "hamming", "randomness"]
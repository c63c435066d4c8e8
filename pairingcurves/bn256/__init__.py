"""BN256 fields, curve groups G1 and G2, the target group Gt and the optimal ate pairing."""

__all__ = ["fq", "fr", "fq2", "fq6", "fq12", "curve", "engine"]
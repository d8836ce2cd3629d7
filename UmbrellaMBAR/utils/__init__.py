from .mdcrd import read_mdcrd_box
from .analyzer import UmbrellaSamplingAnalyzer, harmonic_bias

__all__ = ["read_mdcrd_box", "UmbrellaSamplingAnalyzer", "harmonic_bias"]

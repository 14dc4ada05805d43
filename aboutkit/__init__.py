"""
aboutkit: runtime and environment diagnostics for application kernels.
"""

__version__ = "1.4.2"

# Release support window, "MM/YYYY" (last day of the month, inclusive)
END_OF_MAINTENANCE = "07/2027"
END_OF_LIFE = "07/2028"

"""
WildCSP - closest string solvers over {0, 1, *}.
"""

__version__ = "0.1.0"

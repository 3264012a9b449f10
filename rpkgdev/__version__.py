"""Version information for rpkgdev package"""

__version__ = "0.1.0"
__version_info__ = (0, 1, 0)
__author__ = "Blas M. Benito"
__license__ = "MIT"

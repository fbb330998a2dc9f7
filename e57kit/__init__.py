"""Binary and XML building blocks for ASTM E57 3D imaging data files."""

__version__ = "0.1.0"
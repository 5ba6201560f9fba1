"""
Custom setup.py to exclude pygame-dependent files from the wheel.

viewer.py requires pygame, which headless render hosts do not ship.
It is only needed for local interactive use (python -m sdf_glyph --view).
"""

from setuptools import setup
from setuptools.command.build_py import build_py as _build_py


# Files that require pygame and should not be packaged in the wheel.
_EXCLUDE_MODULES = {"viewer"}


class BuildPy(_build_py):
    """Custom build_py that excludes pygame-dependent modules."""

    def find_package_modules(self, package, package_dir):
        modules = super().find_package_modules(package, package_dir)
        return [
            (pkg, mod, path)
            for (pkg, mod, path) in modules
            if mod not in _EXCLUDE_MODULES
        ]


setup(
    cmdclass={"build_py": BuildPy},
)

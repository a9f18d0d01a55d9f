from pathlib import Path
from setuptools import find_packages, setup


def _read_version() -> str:
    """Read __version__ from the package without importing it."""
    init = Path(__file__).parent / "src" / "codeflat" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/codeflat/__init__.py")


setup(
    name="codeflat",
    version=_read_version(),
    description="Flatten a folder into a single text file, honoring .gitignore rules",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "pathspec>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["codeflat=codeflat.cli:main"],
    },
)

from pathlib import Path
from setuptools import find_packages, setup

HERE = Path(__file__).parent


def _read_version() -> str:
    """Read __version__ from the package without importing it."""
    init = HERE / "src" / "commentstrip" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/commentstrip/__init__.py")


setup(
    name="commentstrip",
    version=_read_version(),
    description="Strip // and /* */ comments from C-like sources, literals untouched",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "tiktoken>=0.7",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "hypothesis>=6",
        ],
    },
    entry_points={
        "console_scripts": [
            "commentstrip=commentstrip.cli:main",
        ],
    },
)

from pathlib import Path
from setuptools import find_packages, setup


def _read_version() -> str:
    """Read __version__ from src/owo/__init__.py without importing the package."""
    init = Path(__file__).parent / "src" / "owo" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    return "0.0.0"


setup(
    name="owo",
    version=_read_version(),
    description="Like tree, but writes every file's contents into a single Markdown file",
    author="xOphiuchus",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "pathspec>=0.12",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["owo=owo.cli:main"],
    },
)

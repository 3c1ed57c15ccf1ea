from pathlib import Path
from setuptools import setup, find_namespace_packages


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "cora" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/cora/__init__.py")


setup(
    name="cora",
    version=_read_version(),
    description="Concatenate files in a directory into a single file",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["cora", "cora.*"]),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["cora=cora.cli:main"]},
)

from pathlib import Path
import re

from setuptools import find_packages, setup


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "flagparse" / "__init__.py"
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", init.read_text(encoding="utf-8"), re.M)
    if not match:
        raise RuntimeError("No se encontró __version__ en src/flagparse/__init__.py")
    return match.group(1)


setup(
    name="flagparse",
    version=_read_version(),
    description="Extracción de flags cortos y largos de una línea de comandos",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={"test": ["pytest"]},
)

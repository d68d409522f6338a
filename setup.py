import re
from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


def read_version() -> str:
    main_path = Path(__file__).resolve().parent / "b64hex" / "main.py"
    match = re.search(r'^\s*ENGINE_VERSION = "([^"]+)"', main_path.read_text(encoding="utf-8"), re.M)
    if match is None:
        raise RuntimeError("ENGINE_VERSION not found in b64hex/main.py")
    return match.group(1)


setup(
    name="b64hex",
    version=read_version(),
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "colorama>=0.4.6",
    ],
    entry_points={
        "console_scripts": [
            "b64hex = b64hex.main:main",
            "hexb64 = b64hex.main:main",
        ],
    },
    python_requires=">=3.10",
    description="Convert between Base64 and hex from the command line",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)

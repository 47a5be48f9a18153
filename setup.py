from pathlib import Path

from setuptools import find_packages, setup

root = Path(__file__).parent
readme = root / "README.md"

setup(
    name="reactwire",
    version="0.1.0",
    description="Compile HTML-like templates with {{ bindings }} into React JSX components.",
    long_description=readme.read_text("utf-8") if readme.exists() else "",
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"reactwire": ["templates/*.j2"]},
    include_package_data=True,
    install_requires=[
        "click>=8.0",
        "jinja2>=3.1",
        "rich>=13.0",
        "rich-click>=1.7",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "reactwire=reactwire.cli.main:cli",
        ],
    },
    zip_safe=False,
)

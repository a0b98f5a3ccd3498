from setuptools import setup, find_packages

setup(
    name="cssrename",
    version="0.1.0",
    description="Rename CSS class selectors across stylesheets from a remote change list",
    packages=find_packages(include=["cssrename", "cssrename.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0",
        "pydantic>=2.0",
        "httpx>=0.24",
        "tomli>=2.0",
        "tomli-w>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "cssrename=cssrename.cli:cli",
        ],
    },
)

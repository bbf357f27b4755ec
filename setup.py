from setuptools import setup, find_packages

setup(
    name="nflverse_fetch",
    version="0.1.0",
    description="Cached loaders for nflverse NFL datasets",
    packages=find_packages(where="src", exclude=["tests", "tests.*"]),
    package_dir={"": "src"},
    install_requires=[
        "pandas",
        "pyarrow",
        "python-dotenv",
        "requests"
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "nflverse-fetch=nflverse_fetch.cli:main",
        ],
    },
    python_requires=">=3.8",
)

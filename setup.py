from setuptools import setup, find_packages

setup(
    name="hncli",
    version="0.2.0",
    description="A simple commandline Hacker News client",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "requests>=2.31.0",
        "rich>=13.0.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "hncli=hncli.cli:main",
        ],
    },
    python_requires=">=3.9",
)

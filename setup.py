from setuptools import setup, find_packages

setup(
    name="backtalk",
    version="0.1.0",
    description="Reverse audio recordings and score backwards imitations",
    author="",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "scipy>=1.7.0",
        "rich>=12.5.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "backtalk=backtalk.main:main",
        ],
    },
)

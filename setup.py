from setuptools import setup, find_packages


setup(
    name="bwmatch",
    version="0.1.0",
    description="Burrows-Wheeler transform indexing and approximate pattern matching",
    packages=find_packages(include=["bwmatch", "bwmatch.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "psutil",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "bwmatch=bwmatch.main:main",
        ],
    },
    zip_safe=False,
)

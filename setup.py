from setuptools import setup, find_packages

setup(
    name="grid-life",
    version="0.1.0",
    description="Conway's Game of Life on a bounded grid, printing the final generation",
    author="grid-life contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=[
        "torch>=1.7.0",
        "numpy>=1.19.0",
        "vispy>=0.6.6",
        "PyQt5>=5.15.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.7",
    entry_points={
        "console_scripts": [
            "grid-life=main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Artificial Life",
    ],
)

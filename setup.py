from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "pandas>=1.5.0",
    "matplotlib>=3.7.0",
    "cairosvg>=2.5.2",
    "pillow>=9.3.0",
]

# Test dependencies
test_requirements = [
    "pytest>=7.0.0",
]

setup(
    name="group_avatar",
    version="0.1.0",
    description="Deterministic partitioned group avatars with stable per-participant colors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "group-avatar=group_avatar.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)

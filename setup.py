import setuptools

setuptools.setup(
    name="aerocalc",
    version="0.1.0",
    author="The aerocalc developers",
    license="gpl-3.0",
    description="Aerospace engineering calculators: compressible flow solvers and friends.",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=["numpy", "scipy", "click", "pyyaml"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "aerocalc=aerocalc.cli:main",
        ],
    },
)

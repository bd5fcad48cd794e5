# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mintedgen",
    version="0.1.0",
    description="Generate a LaTeX source-code appendix: a TikZ tree of the project's files plus minted listings",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["mintedgen", "mintedgen.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'mintedgen=mintedgen.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

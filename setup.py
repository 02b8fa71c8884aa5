# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treeprinter",
    version="0.1.0",
    description="Print a directory tree to the console, to a file, or to both",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treeprinter*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'treeprinter=treeprinter.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

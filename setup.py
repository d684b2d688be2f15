# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="nospace",
    version="0.1.0",
    description="Rebuild a directory tree from a shell session transcript and answer disk usage queries",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["nospace", "nospace.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'nospace=nospace.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

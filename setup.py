# setup.py
from setuptools import setup, find_packages

setup(
    name="foldersetup",
    version="1.0.0",
    description="Parse folder structure descriptions into normalized folder/file trees",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'foldersetup=foldersetup.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="resutil",
    version="0.1.0",
    description="Archive-transparent resource listing and small helpers for Python packages",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    packages=find_namespace_packages(where="src", include=["resutil", "resutil.*"]),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'resutil=resutil.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

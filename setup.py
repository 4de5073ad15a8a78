# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="scm",
    version="0.1.0",
    description="Tree-walking evaluator for a small Scheme dialect",
    packages=find_namespace_packages(include=["scm", "scm.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["scm=scm.__main__:main"],
    },
    zip_safe=False,
)

"""
setup.py
"""

from setuptools import setup, find_packages

setup(
    name='authflow',
    version='1.0.0',
    description='Pluggable authentication flow with PIN, Touch ID and Face ID variants.',
    license='Apache 2.0',
    packages=find_packages('src/'),
    package_dir={'': 'src'},
    python_requires=">=3.9",
    install_requires=[
        "PyYAML",
        "click",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    entry_points={
        "console_scripts": ["authflow-run=authflow.scripts.authflow_run:run_authentication_flow"]
    }
)

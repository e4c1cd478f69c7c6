# setup.py
from setuptools import setup, find_packages

setup(
    name="docsidebar",
    version="0.1.0",
    description="Build a documentation sidebar from Markdown front-matter titles",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'docsidebar=docsidebar.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

from setuptools import setup, find_packages

setup(
    name="teetimes",
    version="0.1.0",
    description="Show available tee times of the IKGA golf courses",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"teetimes": ["py.typed"]},
    python_requires=">=3.10",
    install_requires=[
        'requests>=2.31.0',
        'beautifulsoup4>=4.12.0',
        'PyYAML>=6.0',
        'python-dateutil>=2.8.2',
        'typing_extensions>=4.5.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'coverage>=7.0.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'teetimes=teetimes.cli:main'
        ]
    }
)

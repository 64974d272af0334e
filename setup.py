from setuptools import find_packages, setup

setup(
    name="ustx-pitch",
    version="0.1.0",
    description="Convert OpenUtau note pitch data to tick based pitch curves",
    packages=find_packages(include=["ustx_pitch", "ustx_pitch.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24",
        "pretty_midi>=0.2.10",
        "PyYAML>=6.0",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "mido>=1.3",
        ],
    },
    entry_points={
        "console_scripts": ["ustx-pitch=ustx_pitch.cli:main"],
    },
)

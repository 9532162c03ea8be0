import pathlib
from setuptools import setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README_PATH = HERE / "README.md"
README = README_PATH.read_text() if README_PATH.exists() else "Rules engine for the game of hanabi."

# This call to setup() does all the work
setup(
    name='hanabi_rules',
    version='0.1.0',
    description='Rules engine for the game of hanabi, built for simulation and learning agents.',
    long_description_content_type="text/markdown",
    long_description=README,
    packages=['hanabi_rules', 'hanabi_rules.common_utils'],
    license="MIT",
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)

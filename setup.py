from setuptools import setup

setup(
    name="collext",
    version="0.0.1",
    description="Binary heap and lowercase trie with renderable snapshots",
    author="creepysta",
    author_email="travisparker.thechoice93@gmail.com",
    python_requires=">=3.10",
    packages=["collext"],
    extras_require={"test": ["pytest"]},
)

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pairingcurves"
version = "0.1.0"
description = "BN256 (BN254) pairing-friendly curve arithmetic in pure Python: prime fields, tower extensions, G1/G2 groups and the optimal ate pairing."
requires-python = ">=3.10"
dependencies = []
keywords = ["bn254", "bn256", "pairing", "elliptic-curve", "finite-field", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pairingcurves"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

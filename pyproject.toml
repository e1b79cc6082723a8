[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftscc"
version = "0.1.0"
description = "Strongly connected components and pairwise strong connectivity of directed graphs under edge failures and insertions, using k-fault-tolerant reachability subgraphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "strongly connected components",
    "fault tolerance",
    "reachability",
    "max flow",
    "heavy path decomposition",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftscc-failures = "ftscc.failures:main"
ftscc-queries = "ftscc.queries:main"
ftscc-updates = "ftscc.updates:main"

[tool.hatch.build.targets.wheel]
packages = ["ftscc"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avlcourse"
version = "0.1.0"
description = "An AVL tree with an in-order cursor, plus small sorting, Fibonacci and counting exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "balanced-tree", "binary-search-tree", "merge-sort", "fibonacci", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
avl-ops = "avlcourse.counting:avl_ops_main"
map-ops = "avlcourse.counting:map_ops_main"
avl-demo = "avlcourse.counting:demo_main"
mergesort-demo = "avlcourse.sorting:main"
fib-iter = "avlcourse.fibonacci:main_iterative"
fib-rec = "avlcourse.fibonacci:main_recursive"
lin-workload = "avlcourse.workloads:main_linear"
quad-workload = "avlcourse.workloads:main_quadratic"

[tool.hatch.build.targets.wheel]
packages = ["avlcourse"]

[tool.hatch.build.targets.sdist]
include = ["avlcourse", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

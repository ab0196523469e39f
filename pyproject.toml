[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parlab"
version = "0.1.0"
description = "Small, runnable demonstrations of parallel programming patterns: barriers, races, semaphores, prefix sums, Jacobi relaxation, task farms and pipeline sieves"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "parallel",
    "concurrency",
    "threads",
    "barrier",
    "semaphore",
    "prefix-sum",
    "jacobi",
    "task-farm",
    "prime-sieve",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parlab-counter = "parlab.counter:main"
parlab-hello = "parlab.hello:main"
parlab-producer-consumer = "parlab.producer_consumer:main"
parlab-prefix-sum = "parlab.prefix_sum:main"
parlab-grid-jacobi = "parlab.grid_jacobi:main"
parlab-ring-jacobi = "parlab.ring_jacobi:main"
parlab-task-farm = "parlab.task_farm:main"
parlab-prime-sieve = "parlab.prime_sieve:main"

[tool.hatch.build.targets.wheel]
packages = ["parlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

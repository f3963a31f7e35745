[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "clinicdesk"
version = "1.0.0"
description = "Domain model and services for a small clinic: patients, staff, medicines, examinations, clinical tests and billing."
requires-python = ">=3.10"
dependencies = []
keywords = ["clinic", "hospital", "medical records", "billing", "patients"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["clinicdesk*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

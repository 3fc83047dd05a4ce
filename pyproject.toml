[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "opskit"
version = "0.1.0"
description = "Small operations tools: a token-authenticated HTTP API client, HTTP fetchers, an iterative DNS resolver and helpers for webhook and storage workflows"
requires-python = ">=3.10"
keywords = ["devops", "http", "jwt", "dns", "resolver", "s3", "webhook"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "requests",
    "dnspython",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
opskit-login = "opskit.cli_login:main"
opskit-get = "opskit.httpget:main"
opskit-hello = "opskit.hello:main"
opskit-counter = "opskit.counter:main"

[tool.hatch.build.targets.wheel]
packages = ["opskit"]

[tool.pytest.ini_options]
addopts = "-ra"

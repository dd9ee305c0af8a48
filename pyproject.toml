[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlab"
version = "0.1.0"
description = "Small TCP/IP exercises: byte order, address conversion, host lookup and simple socket clients and servers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sockets", "tcp", "networking", "byte-order", "dns", "echo", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlab-endian = "netlab.addr:endian_main"
netlab-inet-addr = "netlab.addr:inet_addr_main"
netlab-inet-ntoa = "netlab.addr:inet_ntoa_main"
netlab-tcp-server = "netlab.greeting:server_main"
netlab-tcp-client = "netlab.greeting:client_main"
netlab-gethostbyname = "netlab.hostinfo:byname_main"
netlab-gethostbyaddr = "netlab.hostinfo:byaddr_main"
netlab-echo-server = "netlab.echo:server_main"
netlab-echo-client = "netlab.echo:client_main"
netlab-file-server = "netlab.filetransfer:server_main"
netlab-file-client = "netlab.filetransfer:client_main"
netlab-op-server = "netlab.opcalc:server_main"
netlab-op-client = "netlab.opcalc:client_main"

[tool.hatch.build.targets.wheel]
packages = ["netlab"]

[tool.hatch.build.targets.sdist]
include = ["netlab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iotseclab"
version = "0.1.0"
description = "Publish XOR-obfuscated sensor readings to an MQTT broker"
requires-python = ">=3.10"
dependencies = [
    "paho-mqtt>=1.6",
]
keywords = ["mqtt", "iot", "xor", "cipher", "telemetry", "security-lab"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet",
    "Topic :: Education",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
iotseclab = "iotseclab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["iotseclab"]

[tool.pytest.ini_options]
addopts = "-ra"

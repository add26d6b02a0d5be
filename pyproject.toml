[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oaiclient"
version = "0.1.0"
description = "Typed request and response models for OpenAI-compatible APIs, with a realtime WebSocket client"
requires-python = ">=3.10"
keywords = ["openai", "api", "models", "pydantic", "chat", "completion", "realtime", "websocket"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "pydantic>=2",
    "websockets>=13",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["oaiclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

"""
Pytest configuration and fixtures for cost optimizer tests
"""

import shutil
import tempfile
from pathlib import Path

import pytest
import yaml

from costopt import TaskComplexityClassifier


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def write_config(temp_dir):
    """Write a YAML config file and return its path"""

    def _write(data, name="config.yaml"):
        config_path = temp_dir / name
        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
        return config_path

    return _write


@pytest.fixture
def classifier():
    """Classifier with default configuration"""
    return TaskComplexityClassifier()


@pytest.fixture
def custom_config():
    """Configuration with threshold and multiplier overrides"""
    return {
        "value_thresholds": {"chat": 100, "single_agent": 500},
        "custom_multipliers": {"multi-agent": 10},
    }


@pytest.fixture
def custom_classifier(custom_config):
    """Classifier with custom configuration"""
    return TaskComplexityClassifier(custom_config)

"""
Shared fixtures for boundary checker tests.

Tests build small JS/TS projects under tmp_path and scan them for real.
"""

import json
from pathlib import Path

import pytest


class Project:
    """A throwaway source tree."""

    def __init__(self, root: Path):
        self.root = root

    def write(self, rel: str, content: str) -> Path:
        path = self.root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        return path

    def tsconfig(self, paths: dict, base_url: str = None, name: str = 'tsconfig.json', rel_dir: str = '') -> Path:
        options = {'paths': paths}
        if base_url is not None:
            options['baseUrl'] = base_url
        rel = f"{rel_dir}/{name}" if rel_dir else name
        return self.write(rel, json.dumps({'compilerOptions': options}))


@pytest.fixture
def project(tmp_path):
    return Project(tmp_path)


@pytest.fixture
def client_button(project):
    """components/Button.tsx carrying the directive."""
    return project.write(
        'components/Button.tsx',
        '"use client"\n\nexport default function Button() {\n  return <button />\n}\n'
    )

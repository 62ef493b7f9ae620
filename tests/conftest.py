"""
Global test fixtures for translate-extract tests.

Provides in-memory sources for the parsers and a helper that lays out a
small Angular-style source tree on disk for the extraction task.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

COMPONENT_SOURCE = """
import { Component } from '@angular/core';
import { TranslateService } from '@ngx-translate/core';
import { marker as _ } from '@biesbjerg/ngx-translate-extract-marker';

const TITLE = _('app.title');

@Component({
  selector: 'app-root',
  templateUrl: './app.component.html'
})
export class AppComponent {
  constructor(private readonly translate: TranslateService) {}

  public greet(): void {
    this.translate.get('app.greeting').subscribe();
    this.translate.instant(['app.first', 'app.second']);
  }
}
"""

TEMPLATE_SOURCE = """
<h1>{{ 'app.heading' | translate }}</h1>
<p translate>app.paragraph</p>
<button translate="app.button"></button>
"""


@pytest.fixture
def component_source() -> str:
    """TypeScript component using the service and the marker."""
    return COMPONENT_SOURCE


@pytest.fixture
def template_source() -> str:
    """HTML template using the pipe and the directive."""
    return TEMPLATE_SOURCE


@pytest.fixture
def source_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """
    Create files below ``tmp_path / "src"``.

    Returns:
        Callable taking a mapping of relative path to contents and returning
        the source root
    """

    def create(files: dict[str, str]) -> Path:
        root = tmp_path / "src"
        root.mkdir(exist_ok=True)
        for relative_path, contents in files.items():
            path = root / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            _ = path.write_text(contents, encoding="utf-8")
        return root

    return create

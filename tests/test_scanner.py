"""
End-to-end scanner tests: propagation, walking and the reference scenarios.
"""

from pathlib import Path

import pytest

from rsc_boundary import BoundaryChecker
from rsc_boundary.aliases import AliasTableCache
from rsc_boundary.imports import parse_imports
from rsc_boundary.models import ScanConfig
from rsc_boundary.scanner import (
    BoundaryScanError,
    collect_marked_names,
    iter_source_files,
    scan_file,
    scan_path,
)


PAGE = """import Button from '../components/Button'

export default function Page() {
  return (
    <main>
      <Button />
    </main>
  )
}
"""


def report(root: Path):
    return [(Path(r.file_path).relative_to(root).as_posix(), r.line_number, r.line_text)
            for r in BoundaryChecker(root).run()]


class TestScenarios:

    def test_default_import_of_client_component(self, project, client_button):
        project.write('app/page.tsx', PAGE)
        assert report(project.root) == [('app/page.tsx', 6, '      <Button />')]

    def test_renamed_import_reported_by_local_name(self, project):
        project.write('components/panel.tsx', "'use client';\nexport function Panel() {}\n")
        project.write('app/page.tsx', (
            "import { Panel as P } from '../components/panel'\n"
            "\n"
            "const x = <Panel />\n"
            "const y = <P>hi</P>\n"
        ))
        assert report(project.root) == [('app/page.tsx', 4, 'const y = <P>hi</P>')]

    def test_alias_resolves_like_relative_path(self, project, client_button):
        project.tsconfig({'@components/*': ['./components/*']})
        project.write('app/aliased.tsx', "import Button from '@components/Button'\n<Button />\n")
        project.write('app/relative.tsx', "import Button from '../components/Button'\n<Button />\n")
        assert report(project.root) == [
            ('app/aliased.tsx', 2, '<Button />'),
            ('app/relative.tsx', 2, '<Button />'),
        ]

    def test_directory_import_resolves_index(self, project):
        project.tsconfig({'@/*': ['./*']})
        project.write('components/ui/index.tsx', '"use client"\nexport const Card = () => null\n')
        project.write('app/dashboard.tsx', "import { Card } from '@/components/ui'\n\n<Card />\n")
        assert report(project.root) == [('app/dashboard.tsx', 3, '<Card />')]

    def test_type_only_import_never_marks(self, project):
        project.write('components/foo.tsx', '"use client"\nexport type Foo = {}\nexport const Foo = 1\n')
        project.write('app/page.tsx', "import type { Foo } from '../components/foo'\n<Foo />\n")
        assert report(project.root) == []

    def test_multiline_named_import(self, project):
        project.tsconfig({'@/*': ['./*']})
        project.write('components/ui/panel.tsx', '"use client"\nimport * as React from \'react\'\n')
        project.write('app/dashboard.tsx', (
            "import {\n"
            "  Panel,\n"
            "  PanelBody,\n"
            "} from '@/components/ui/panel'\n"
            "\n"
            "export default function Dashboard() {\n"
            "  return (\n"
            "    <Panel>\n"
            "      <PanelBody>Body</PanelBody>\n"
            "    </Panel>\n"
            "  )\n"
            "}\n"
        ))
        assert [line for _, line, _ in report(project.root)] == [8, 9]


class TestPropagation:

    def test_namespace_import_never_marks(self, project, client_button):
        project.write('app/page.tsx', "import * as Button from '../components/Button'\n<Button.Root />\n")
        assert report(project.root) == []

    def test_server_module_does_not_mark(self, project):
        project.write('components/Server.tsx', 'export default function Server() {}\n')
        project.write('app/page.tsx', "import Server from '../components/Server'\n<Server />\n")
        assert report(project.root) == []

    def test_directive_after_code_does_not_mark(self, project):
        project.write('components/Late.tsx', "import x from 'y'\n'use client'\n")
        project.write('app/page.tsx', "import Late from '../components/Late'\n<Late />\n")
        assert report(project.root) == []

    def test_client_file_itself_not_reported(self, project, client_button):
        assert report(project.root) == []

    def test_unresolvable_import_is_skipped(self, project, client_button):
        project.write('app/page.tsx', "import Gone from './gone'\nimport Button from '../components/Button'\n<Gone /><Button />\n")
        assert report(project.root) == [('app/page.tsx', 3, '<Gone /><Button />')]

    def test_overlong_specifier_only_loses_that_import(self, project, client_button):
        project.write('app/page.tsx', (
            "import Long from './" + 'a' * 300 + "'\n"
            "import Button from '../components/Button'\n"
            "<Button />\n"
        ))
        messages = []
        results = list(scan_path(project.root, ScanConfig(), log=messages.append))
        assert [line.line_number for r in results for line in r.lines] == [3]
        assert not any('failed to scan' in m for m in messages)

    def test_later_candidate_can_mark(self, project):
        project.tsconfig({'@/*': ['./server/*'], '@*': ['./client/*']})
        project.write('server/Thing.ts', 'export const Thing = 1\n')
        project.write('client/Thing.tsx', '"use client"\nexport const Thing = 1\n')
        project.write('app/page.tsx', "import { Thing } from '@/Thing'\n<Thing />\n")
        assert report(project.root) == [('app/page.tsx', 2, '<Thing />')]

    def test_collect_marked_names_order_and_dedupe(self, project):
        project.write('c/a.tsx', '"use client"\n')
        project.write('c/b.tsx', '"use client"\n')
        lines = [
            "import { Z, A } from './a'",
            "import A2, { Z as Y } from './b'",
            "import { Z } from './a'",
        ]
        marked = collect_marked_names(project.root / 'c', parse_imports(lines), AliasTableCache(), ScanConfig())
        assert marked == ['Z', 'A', 'A2', 'Y']

    def test_scan_file_without_imports(self, project):
        path = project.write('app/plain.tsx', '<Button />\n')
        assert scan_file(path, ScanConfig(), AliasTableCache()) is None

    def test_scan_file_result(self, project, client_button):
        path = project.write('app/page.tsx', PAGE)
        result = scan_file(path, ScanConfig(), AliasTableCache())
        assert result.marked_names == ['Button']
        assert [line.line_number for line in result.lines] == [6]

    def test_marked_file_with_no_usages(self, project, client_button):
        project.write('app/page.tsx', "import Button from '../components/Button'\nexport { Button }\n")
        results = list(scan_path(project.root, ScanConfig()))
        assert len(results) == 1
        assert results[0].lines == []


class TestWalker:

    def test_ignored_dirs_and_extensions(self, project):
        project.write('app/a.tsx', '')
        project.write('app/b.js', '')
        project.write('app/c.css', '')
        project.write('app/d.mjs', '')
        project.write('node_modules/pkg/index.js', '')
        project.write('dist/out.js', '')
        project.write('build/out.js', '')
        project.write('.git/hook.js', '')
        project.write('lib/rebuild.ts', '')
        got = [p.relative_to(project.root).as_posix() for p in iter_source_files(project.root, ScanConfig())]
        assert got == ['app/a.tsx', 'app/b.js', 'lib/rebuild.ts']

    def test_sorted_order(self, project):
        for name in ['z.ts', 'a.ts', 'm/b.ts', 'b/c.ts']:
            project.write(name, '')
        got = [p.relative_to(project.root).as_posix() for p in iter_source_files(project.root, ScanConfig())]
        assert got == ['a.ts', 'z.ts', 'b/c.ts', 'm/b.ts']

    def test_file_root(self, project):
        path = project.write('only.tsx', '')
        assert list(iter_source_files(path, ScanConfig())) == [path]

    def test_missing_root_is_fatal(self, project):
        with pytest.raises(BoundaryScanError):
            list(iter_source_files(project.root / 'missing', ScanConfig()))

    def test_unreadable_source_is_skipped(self, project, client_button, monkeypatch):
        page = project.write('app/page.tsx', PAGE)
        project.write('app/other.tsx', PAGE)

        import rsc_boundary.scanner as scanner
        real = scanner.read_lines

        def flaky(path):
            if path == page:
                raise PermissionError(13, 'Permission denied', str(path))
            return real(path)

        monkeypatch.setattr(scanner, 'read_lines', flaky)
        messages = []
        results = list(scan_path(project.root, ScanConfig(), log=messages.append))
        assert [Path(r.file_path).name for r in results] == ['other.tsx']
        assert any('failed to scan' in m for m in messages)

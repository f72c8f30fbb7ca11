from __future__ import annotations

from stylegate.rules import Violation
from stylegate.rules.layout import FilenameMatchesExportRule, TestFileSuffixRule
from stylegate.rules.naming import (
    CamelCaseIdentifierRule,
    HookNamingRule,
    PascalCaseComponentRule,
)
from test_utils import project_tree


def describe_pascal_case_component_rule() -> None:
    rule = PascalCaseComponentRule()

    def flags_lowercase_component() -> None:
        file = project_tree.describe('myComponent.js', '''
            export default function myComponent() {
              return <div />;
            }
        ''')

        results = rule.check(file)

        assert results == [
            Violation('pascal-case-component', 'myComponent.js', 'expected PascalCase, got myComponent', 1)
        ]
        assert str(results[0]) == 'myComponent.js: [pascal-case-component] expected PascalCase, got myComponent'

    def flags_class_components() -> None:
        file = project_tree.describe('legacy.js', '''
            class legacy extends React.Component {}
            export default legacy;
        ''')

        assert [v.message for v in rule.check(file)] == ['expected PascalCase, got legacy']

    def accepts_pascal_case_component() -> None:
        file = project_tree.describe('Button.jsx', '''
            const Button = () => <button />;
            export default Button;
        ''')

        assert rule.check(file) == []

    def ignores_non_components() -> None:
        file = project_tree.describe('format.js', 'export default function format() {}')

        assert rule.check(file) == []

    def ignores_anonymous_components() -> None:
        file = project_tree.describe('Page.jsx', 'export default () => <main />;')

        assert rule.check(file) == []


def describe_camel_case_identifier_rule() -> None:
    rule = CamelCaseIdentifierRule()

    def flags_badly_cased_identifiers() -> None:
        file = project_tree.describe('util.js', '''
            const my_value = 1;
            let MAX = 2;
            const MAX_SIZE = 3;
            function do_thing() {}
            class thing_holder {}
            const _ = require('lodash');
            function Formatter() {}
        ''')

        assert rule.check(file) == [
            Violation('camel-case-identifier', 'util.js', 'expected camelCase, got my_value', 1),
            Violation('camel-case-identifier', 'util.js', 'expected camelCase, got MAX', 2),
            Violation('camel-case-identifier', 'util.js', 'expected camelCase, got do_thing', 4),
        ]

    def accepts_hooks() -> None:
        file = project_tree.describe('useMyHook.js', 'export default function useMyHook() {}')

        assert rule.check(file) == []


def describe_hook_naming_rule() -> None:
    rule = HookNamingRule()

    def flags_functions_calling_hooks() -> None:
        file = project_tree.describe('fetchData.js', '''
            import { useState } from 'react';

            export default function fetchData() {
              const [x] = useState(0);
              return x;
            }
        ''')

        assert rule.check(file) == [
            Violation('hook-naming', 'fetchData.js', 'functions calling hooks must start with "use", got fetchData', 3)
        ]

    def flags_arrow_functions_calling_hooks() -> None:
        file = project_tree.describe('load.js', '''
            const load = () => useQuery(QUERY);
            export default load;
        ''')

        assert len(rule.check(file)) == 1

    def accepts_hooks() -> None:
        file = project_tree.describe('useMyHook.js', '''
            import { useState } from 'react';

            export default function useMyHook() {
              const [value] = useState(0);
              return value;
            }
        ''')

        assert rule.check(file) == []

    def ignores_components() -> None:
        file = project_tree.describe('Counter.jsx', '''
            export default function Counter() {
              const [count] = useState(0);
              return <span>{count}</span>;
            }
        ''')

        assert rule.check(file) == []

    def ignores_non_function_exports() -> None:
        file = project_tree.describe('config.js', '''
            const config = { a: 1 };
            function useX() {
              return useState(1);
            }
            export default config;
        ''')

        assert rule.check(file) == []


def describe_filename_matches_export_rule() -> None:
    rule = FilenameMatchesExportRule()

    def flags_mismatching_file_name() -> None:
        file = project_tree.describe('src/Button.jsx', '''
            export default function Card() {
              return <div />;
            }
        ''')

        assert rule.check(file) == [
            Violation('filename-matches-export', 'src/Button.jsx', 'file name Button does not match default export Card', 1)
        ]

    def accepts_matching_file_name() -> None:
        file = project_tree.describe('src/format.js', 'export default function format() {}')

        assert rule.check(file) == []

    def exempts_index_files() -> None:
        file = project_tree.describe('src/components/index.js', '''
            import Button from './Button';
            export default Button;
        ''')

        assert rule.check(file) == []

    def ignores_tests_and_stories() -> None:
        test = project_tree.describe('Button.test.js', 'export default function suite() {}')
        story = project_tree.describe('Button.stories.jsx', 'export default function Primary() { return <b />; }')

        assert rule.check(test) == []
        assert rule.check(story) == []

    def exempts_hidden_configuration_files() -> None:
        file = project_tree.describe('.eslintrc.js', '''
            const config = { root: true };
            module.exports = config;
        ''')

        assert file.stem == 'eslintrc'
        assert file.suffixes == ()
        assert rule.check(file) == []


def describe_test_file_suffix_rule() -> None:
    rule = TestFileSuffixRule()

    def flags_unsuffixed_files_in_tests_directory() -> None:
        file = project_tree.describe('src/__tests__/helpers.js', 'export const helper = 1;')

        assert rule.check(file) == [
            Violation('test-file-suffix', 'src/__tests__/helpers.js', 'files in __tests__ must use a .test or .spec suffix')
        ]

    def accepts_suffixed_files() -> None:
        file = project_tree.describe('src/__tests__/Button.test.js', 'test("renders", () => {});')

        assert rule.check(file) == []

    def ignores_files_outside_tests_directory() -> None:
        file = project_tree.describe('src/helpers.js', 'export const helper = 1;')

        assert rule.check(file) == []

# -*- coding: utf-8 -*-
"""
Scanner test-suite for *commentstrip*.

• Literal scenarios for line/block comments, literals and empty input.
• State-machine edge cases (lookahead at end of input, delimiter overlap).
• Unterminated comments/literals and the single-backslash escape rule.
"""
from __future__ import annotations

import unittest
from concurrent.futures import ThreadPoolExecutor

from commentstrip import Obfuscator, ScanMode, ScanResult, ScanState, obfuscate


class ScannerBaseTest(unittest.TestCase):
    def setUp(self) -> None:
        self.obf = Obfuscator()

    def assertUnchanged(self, source: str) -> None:
        self.assertEqual(self.obf.obfuscate(source), source)


# --------------------------------------------------------------------------- #
#  1. Reference scenarios                                                     #
# --------------------------------------------------------------------------- #
class ReferenceScenarioTests(ScannerBaseTest):
    def test_no_comments(self) -> None:
        self.assertUnchanged("int main() { return 0; }")

    def test_single_line_comment(self) -> None:
        self.assertEqual(
            self.obf.obfuscate("int x = 42; // This is a comment\nint y = 43;"),
            "int x = 42; \nint y = 43;",
        )

    def test_multi_line_comment(self) -> None:
        self.assertEqual(
            self.obf.obfuscate("int x = 42; /* This is a\nmulti-line comment */ int y = 43;"),
            "int x = 42;  int y = 43;",
        )

    def test_comment_in_string(self) -> None:
        self.assertUnchanged('char* s = "// not a comment";')

    def test_empty_input(self) -> None:
        self.assertEqual(self.obf.obfuscate(""), "")

    def test_only_comments(self) -> None:
        self.assertEqual(self.obf.obfuscate("// Comment\n/* Another comment */"), "\n")

    def test_string_with_escaped_quotes(self) -> None:
        self.assertUnchanged(r'char* s = "\"// not a comment\"";')

    def test_mixed_comments_and_code(self) -> None:
        source = (
            "\n"
            "int main() { // Start\n"
            '    printf("Hello /* world */"); /* Print */\n'
            "    return 0; // End\n"
            "}\n"
        )
        expected = (
            "\n"
            "int main() { \n"
            '    printf("Hello /* world */"); \n'
            "    return 0; \n"
            "}\n"
        )
        self.assertEqual(self.obf.obfuscate(source), expected)

    def test_module_level_shortcut(self) -> None:
        self.assertEqual(obfuscate("a; // b\n"), "a; \n")


# --------------------------------------------------------------------------- #
#  2. Slashes, stars and lookahead                                            #
# --------------------------------------------------------------------------- #
class DelimiterTests(ScannerBaseTest):
    def test_division_is_kept(self) -> None:
        self.assertEqual(self.obf.obfuscate("a = b / c; // half"), "a = b / c; ")

    def test_trailing_slash_at_end_of_input(self) -> None:
        self.assertUnchanged("a /")
        self.assertUnchanged("/")

    def test_stray_block_terminator_in_code(self) -> None:
        self.assertUnchanged("x */ y")

    def test_slash_star_slash_does_not_close(self) -> None:
        # The '*' of '/*' is consumed, so the following '/' cannot close it.
        self.assertEqual(self.obf.obfuscate("/*/ x */y"), "y")

    def test_double_star_before_close(self) -> None:
        self.assertEqual(self.obf.obfuscate("/** doc **/x"), "x")

    def test_block_comment_opener_inside_line_comment(self) -> None:
        self.assertEqual(self.obf.obfuscate("a // b /* c\nd */ e"), "a \nd */ e")

    def test_line_comment_inside_block_comment(self) -> None:
        self.assertEqual(self.obf.obfuscate("a /* // b */ c"), "a  c")

    def test_adjacent_comments(self) -> None:
        self.assertEqual(self.obf.obfuscate("/*a*//*b*/c//d"), "c")

    def test_carriage_return_inside_line_comment_is_dropped(self) -> None:
        self.assertEqual(self.obf.obfuscate("a // c\r\nb"), "a \nb")

    def test_quote_inside_comment_is_inert(self) -> None:
        self.assertEqual(self.obf.obfuscate("// don't\nx = 'a';"), "\nx = 'a';")
        self.assertEqual(self.obf.obfuscate('/* "open */ y'), " y")


# --------------------------------------------------------------------------- #
#  3. Literals                                                                #
# --------------------------------------------------------------------------- #
class LiteralTests(ScannerBaseTest):
    def test_char_literal_with_double_quote(self) -> None:
        self.assertEqual(self.obf.obfuscate("c = '\"'; // q"), "c = '\"'; ")

    def test_string_with_single_quote(self) -> None:
        self.assertUnchanged('s = "it\'s /* fine */";')

    def test_escaped_single_quote(self) -> None:
        self.assertEqual(self.obf.obfuscate(r"c = '\''; // q"), r"c = '\''; ")

    def test_block_delimiters_in_literal(self) -> None:
        self.assertUnchanged('p = "/* a */ // b */";')

    def test_literal_spanning_newline_is_copied(self) -> None:
        self.assertUnchanged('s = "a\n// b";')

    def test_code_resumes_after_literal(self) -> None:
        self.assertEqual(self.obf.obfuscate('f("x"); /* y */ g();'), 'f("x");  g();')

    def test_escaped_backslash_before_quote_keeps_literal_open(self) -> None:
        # Only the previous character is checked: the final quote of "a\\" is
        # read as escaped, so the literal stays open and the comment survives.
        source = r'x = "a\\"; // c'
        result = self.obf.scan(source)
        self.assertEqual(result.text, source)
        self.assertEqual(result.final_state, ScanState.string('"'))


# --------------------------------------------------------------------------- #
#  4. End of input and scan results                                           #
# --------------------------------------------------------------------------- #
class EndOfInputTests(ScannerBaseTest):
    def test_unterminated_block_comment(self) -> None:
        result = self.obf.scan("a /* b\nc")
        self.assertEqual(result.text, "a ")
        self.assertIs(result.final_state.mode, ScanMode.MULTI_LINE_COMMENT)
        self.assertFalse(result.terminated)

    def test_unterminated_line_comment(self) -> None:
        result = self.obf.scan("a // b")
        self.assertEqual(result.text, "a ")
        self.assertEqual(result.final_state, ScanState.SINGLE_LINE_COMMENT)

    def test_unterminated_string_is_copied_without_closing_quote(self) -> None:
        result = self.obf.scan("s = 'abc // d")
        self.assertEqual(result.text, "s = 'abc // d")
        self.assertEqual(result.final_state, ScanState.string("'"))
        self.assertEqual(str(result.final_state), "string(')")

    def test_terminated_scan(self) -> None:
        result = self.obf.scan("a; /* b */")
        self.assertTrue(result.terminated)
        self.assertEqual(result.final_state, ScanState.CODE)
        self.assertEqual(result.consumed, 10)
        self.assertEqual(result.removed, 7)

    def test_consumed_is_required(self) -> None:
        with self.assertRaises(TypeError):
            ScanResult(text="x", final_state=ScanState.CODE)

    def test_empty_scan_ends_in_code(self) -> None:
        result = self.obf.scan("")
        self.assertEqual(result.text, "")
        self.assertTrue(result.terminated)
        self.assertEqual(result.removed, 0)


# --------------------------------------------------------------------------- #
#  5. Independence of calls                                                   #
# --------------------------------------------------------------------------- #
class IndependenceTests(ScannerBaseTest):
    def test_no_state_leaks_between_calls(self) -> None:
        self.obf.obfuscate("a /* never closed")
        self.assertEqual(self.obf.obfuscate("b */ c"), "b */ c")
        self.obf.obfuscate('s = "never closed')
        self.assertEqual(self.obf.obfuscate("d // e"), "d ")

    def test_shared_instance_across_threads(self) -> None:
        sources = [f'x{i} = "{i}"; /* {i} */ // {i}\n' for i in range(64)]
        expected = [f'x{i} = "{i}";  \n' for i in range(64)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(self.obf.obfuscate, sources))
        self.assertEqual(results, expected)


if __name__ == "__main__":
    unittest.main()

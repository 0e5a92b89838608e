"""
Tests for the readlogic command line interface and knowledge base loading
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "core" / "src"))

from readlogic_core import GrammarError, Rule, parse_rule
from readlogic_cli import CLIConfig, load_knowledge_base, split_sentences
from readlogic_cli.includes import normalize_text
from readlogic_cli.main import body_literals, format_rule, main


@pytest.fixture
def kb_dir(tmp_path):
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "definitions.pl").write_text(
        "% shared definitions\n"
        "moving(X) :- walking(X).\n"
    )
    (tmp_path / "main.pl").write_text(
        '#include "lib/definitions.pl"\n'
        "meeting(X, Y) :- moving(X), moving(Y), not fighting(X, Y).\n"
    )
    return tmp_path


class TestSplitSentences:

    def test_rules_and_includes(self):
        text = """
        % comment
        #include "a.pl"

        p(X) :-
            q(X),
            r(X).
        s(Y) :- t(Y).
        """
        sentences = split_sentences(text)

        assert len(sentences) == 3
        assert sentences[0] == '#include "a.pl"'
        assert "r(X)." in sentences[1]
        assert sentences[2].strip() == "s(Y) :- t(Y)."

    def test_unterminated_sentence_is_kept(self):
        assert split_sentences("p(X) :- q(X)") == ["p(X) :- q(X)"]

    def test_normalize_text(self):
        text = 'p([H | T]) :-\n    q(H),\n    \\+ r(T).\n#include "x.pl"\n'
        assert normalize_text(text) == 'p([H, T]) :- q(H), not(r(T)).\n#include "x.pl"'


class TestLoadKnowledgeBase:

    def test_includes_come_first(self, kb_dir):
        rules = load_knowledge_base(str(kb_dir / "main.pl"))

        assert [rule.head.symbol for rule in rules] == ["moving", "meeting"]
        assert all(isinstance(rule, Rule) for rule in rules)

    def test_include_cycle(self, tmp_path):
        (tmp_path / "a.pl").write_text('#include "b.pl"\na(X) :- b(X).\n')
        (tmp_path / "b.pl").write_text('#include "a.pl"\nb(X) :- c(X).\n')

        rules = load_knowledge_base(str(tmp_path / "a.pl"))

        assert [rule.head.symbol for rule in rules] == ["b", "a"]

    def test_missing_include(self, tmp_path):
        (tmp_path / "main.pl").write_text('#include "missing.pl"\np(X) :- q(X).\n')
        with pytest.raises(FileNotFoundError):
            load_knowledge_base(str(tmp_path / "main.pl"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_knowledge_base(str(tmp_path / "nothing.pl"))

    def test_parse_error(self, tmp_path):
        (tmp_path / "bad.pl").write_text("p(X) :- q(X)\n")
        with pytest.raises(GrammarError):
            load_knowledge_base(str(tmp_path / "bad.pl"))

    def test_normalize(self, tmp_path):
        (tmp_path / "kb.pl").write_text("p([H | T]) :-\n    q(H),\n    \\+ r(T).\n")
        rules = load_knowledge_base(str(tmp_path / "kb.pl"), normalize=True)
        assert rules[0].to_text() == "p([H, T]) :- q(H), not(r(T))."


class TestFormatRule:

    def test_body_literals(self):
        rule = parse_rule("p :- a, not b, c.")
        assert [l.to_text() for l in body_literals(rule)] == ["a", "not(b)", "c"]

    def test_multiline(self):
        rule = parse_rule("p(X) :- a(X), b(X).")
        assert format_rule(rule) == "p(X) :- a(X), b(X)."
        assert format_rule(rule, multiline=True) == "p(X) :-\n\ta(X),\n\tb(X)."


class TestConfig:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("READLOGIC_LOG_LEVEL", raising=False)
        monkeypatch.delenv("READLOGIC_MULTILINE", raising=False)
        config = CLIConfig.from_env()
        assert config.log_level == "WARNING"
        assert config.multiline is False

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("READLOGIC_LOG_LEVEL", "debug")
        monkeypatch.setenv("READLOGIC_MULTILINE", "yes")
        config = CLIConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.multiline is True


class TestMain:

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        monkeypatch.delenv("READLOGIC_LOG_LEVEL", raising=False)
        monkeypatch.delenv("READLOGIC_MULTILINE", raising=False)

    def test_parse(self, kb_dir, capsys):
        assert main(["parse", str(kb_dir / "main.pl")]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "moving(X) :- walking(X).",
            "meeting(X, Y) :- moving(X), moving(Y), not(fighting(X, Y)).",
        ]

    def test_parse_multiline(self, kb_dir, capsys):
        assert main(["parse", "--multiline", str(kb_dir / "main.pl")]) == 0
        assert "meeting(X, Y) :-\n\tmoving(X),\n\tmoving(Y),\n\tnot(fighting(X, Y))." in capsys.readouterr().out

    def test_parse_failure(self, tmp_path, capsys):
        (tmp_path / "bad.pl").write_text("p(X) :- q(X)\n")
        assert main(["parse", str(tmp_path / "bad.pl")]) == 1
        assert "Cannot parse" in capsys.readouterr().err

    def test_parse_missing_file(self, tmp_path, capsys):
        assert main(["parse", str(tmp_path / "missing.pl")]) == 1

    def test_reformat(self, capsys):
        assert main(["reformat", "p(X) :- \\+ (q(X), r(X))"]) == 0
        assert capsys.readouterr().out.strip() == "p(X) :- not(q(X), r(X))."

    def test_reformat_malformed(self, capsys):
        assert main(["reformat", "a :- b :- c"]) == 1
        assert "invalid" in capsys.readouterr().err

    def test_check(self, capsys):
        assert main(["check", "happensAt(walking(X), T)"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "happensAt(walking(X), T)",
            "  variables: T, X",
            "  ground: no",
        ]

    def test_check_term(self, capsys):
        assert main(["check", "--as", "term", "foo"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["foo", "  variables: -", "  ground: yes"]

    def test_check_infix(self, capsys):
        assert main(["check", "--as", "infix-function", "X + 1"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "plus(X, 1)"

    def test_check_failure(self, capsys):
        assert main(["check", "--as", "rule", "p(X)"]) == 1
        assert "as a rule" in capsys.readouterr().err

'''
Parser tests
'''

import math

from stackcalc.parser import parse
from stackcalc.vocabulary import (ALIASES, HELP, NOOP, PHI, QUIT_HINT, Op,
                                  Operation)

from pytest import mark


def test_number(parser):
    assert parser.parse('3.14') == Operation(Op.NUMBER, 3.14)
    assert parser.parse('-2e3\n') == Operation(Op.NUMBER, -2000.0)


def test_special_numbers(parser):
    assert parser.parse('inf').value == math.inf
    assert parser.parse('-Infinity').value == -math.inf
    assert math.isnan(parser.parse('NaN').value)


def test_unparseable(parser, capsys):
    assert parser.parse('abc') is NOOP
    captured = capsys.readouterr()
    assert captured.err == "Error! Couldn't parse abc\n"
    assert captured.out == ''


def test_empty_line(parser, capsys):
    assert parser.parse('\n') is NOOP
    assert "Couldn't parse" in capsys.readouterr().err


@mark.parametrize('line', ['pi', 'PI', 'Pi', ' π '])
def test_pi(parser, line):
    assert parser.parse(line) == Operation(Op.NUMBER, math.pi)


def test_constants(parser):
    assert parser.parse('E') == Operation(Op.NUMBER, math.e)
    for line in 'phi', 'φ', 'ϕ', 'PHI':
        assert parser.parse(line) == Operation(Op.NUMBER, 1.61803398875)
    # A literal, not (1 + sqrt(5)) / 2
    assert PHI == 1.61803398875


@mark.parametrize('line, op', [
    ('+', Op.ADD), ('add', Op.ADD),
    ('-', Op.SUB), ('Subtract', Op.SUB),
    ('*', Op.MUL), ('/', Op.DIV), ('^', Op.POW), ('power', Op.POW),
    ('~', Op.NEG), ('root', Op.SQRT), ('loge', Op.LN),
    ('log', Op.LOG), ('log10', Op.LOG), ('lg', Op.LG), ('log2', Op.LG),
    ('cos^-1', Op.ACOS), ('TAN^-1', Op.ATAN),
    ('to deg', Op.TO_DEG), ('rad', Op.TO_RAD),
    ('cls', Op.CLEAR), ('rot', Op.ROTATE), ('clone', Op.DUPLICATE),
])
def test_aliases(parser, line, op):
    assert parser.parse(line) == Operation(op)


def test_every_alias_parses(parser):
    for word, parsed in ALIASES.items():
        assert parser.parse(word) == parsed


@mark.parametrize('line', ['help', '?', 'HELP'])
def test_help(parser, capsys, line):
    assert parser.parse(line) is NOOP
    assert capsys.readouterr().out == HELP + '\n'


def test_help_lists_every_alias():
    listed = {word.strip()
              for line in HELP.splitlines()[1:]
              for word in line.split(' -- ')[0].split(',')}
    assert ALIASES.keys() <= listed
    assert {'help', '?', 'quit', 'q', 'end'} <= listed


@mark.parametrize('line', ['quit', 'q', 'END'])
def test_quit_does_not_quit(parser, capsys, line):
    assert parser.parse(line) is NOOP
    assert capsys.readouterr().out == QUIT_HINT + '\n'


def test_module_parse():
    assert parse('2') == Operation(Op.NUMBER, 2.0)
    assert str(parse('2')) == 'NUMBER\t2.0'
    assert str(parse('swap')) == 'SWAP'

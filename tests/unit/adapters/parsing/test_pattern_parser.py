"""
Tests unitaires pour PatternFilenameParser.

Verifie les trois motifs de noms de fichiers, leur ordre de priorite
et le repli sans annee.
"""

import re

import pytest

from movielib.adapters.parsing.pattern_parser import (
    FILENAME_PATTERNS,
    FilenamePattern,
    PatternFilenameParser,
    _delimited,
)
from movielib.core.ports.parser import IFilenameParser
from movielib.core.value_objects.parsed_info import ParsedGuess


@pytest.fixture
def parser() -> PatternFilenameParser:
    return PatternFilenameParser()


class TestParserInterface:
    def test_implements_interface(self, parser: PatternFilenameParser) -> None:
        assert isinstance(parser, IFilenameParser)

    def test_pattern_order(self) -> None:
        """L'ordre de priorite des motifs est fixe."""
        assert [p.name for p in FILENAME_PATTERNS] == [
            "dotted",
            "bracketed",
            "parenthesized",
        ]


class TestDottedPattern:
    """Motif Titre.Nom.AAAA.reste.ext"""

    def test_matrix(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("The.Matrix.1999.1080p.mkv") == ParsedGuess("The Matrix", 1999)

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("Blade.Runner.2049.2017.2160p.mkv", ParsedGuess("Blade Runner", 2049)),
            ("Alien.1979.mp4", ParsedGuess("Alien", 1979)),
            ("Mad.Max.Fury.Road.2015.BluRay.x264.avi", ParsedGuess("Mad Max Fury Road", 2015)),
        ],
    )
    def test_dotted_names(
        self, parser: PatternFilenameParser, filename: str, expected: ParsedGuess
    ) -> None:
        assert parser.parse(filename) == expected

    def test_first_four_digit_group_wins(self, parser: PatternFilenameParser) -> None:
        """Le titre est capture de facon non gourmande : premier .AAAA rencontre."""
        assert parser.parse("Blade.Runner.2049.2017.mkv").title == "Blade Runner"


class TestBracketedPattern:
    """Motif Titre [AAAA ...]"""

    def test_inception(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("Inception [2010 bluray].mp4") == ParsedGuess("Inception", 2010)

    def test_no_space_before_bracket(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("Heat[1995].mkv") == ParsedGuess("Heat", 1995)


class TestParenthesizedPattern:
    """Motif Titre (AAAA)"""

    def test_arrival(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("Arrival (2016).avi") == ParsedGuess("Arrival", 2016)

    def test_title_with_spaces(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("No Country for Old Men (2007).mkv") == ParsedGuess(
            "No Country for Old Men", 2007
        )

    def test_unclosed_parenthesis_falls_back(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("Arrival (2016.avi") == ParsedGuess("Arrival (2016", 0)


class TestPrecedence:
    """Un nom correspondant a plusieurs motifs est toujours resolu de la meme facon."""

    def test_dotted_wins_over_parenthesized(self, parser: PatternFilenameParser) -> None:
        # ".2016" et "(2016)" : le motif a points est essaye en premier
        assert parser.parse("Arrival.2016.(2016).mkv") == ParsedGuess("Arrival", 2016)

    def test_bracketed_wins_over_parenthesized(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("Dune [2021] (1984).mkv") == ParsedGuess("Dune", 2021)

    def test_dotted_wins_over_bracketed(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("Dune.1984 [2021].mkv") == ParsedGuess("Dune", 1984)


class TestFallback:
    """Aucun motif ne correspond."""

    def test_random_file(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("randomfile.mkv") == ParsedGuess("randomfile", 0)

    def test_dots_become_spaces(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("Some.Home.Video.mp4") == ParsedGuess("Some Home Video", 0)

    def test_no_extension(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("randomfile") == ParsedGuess("randomfile", 0)

    def test_three_digit_year_is_not_a_year(self, parser: PatternFilenameParser) -> None:
        assert parser.parse("Movie.999.mkv") == ParsedGuess("Movie 999", 0)

    def test_title_never_empty(self, parser: PatternFilenameParser) -> None:
        guess = parser.parse(".mkv")
        assert guess.title == ".mkv"
        assert guess.year == 0


class TestYearConversion:
    def test_unconvertible_year_is_zero(self) -> None:
        """Un extracteur recevant une annee non numerique retourne 0, sans erreur."""
        pattern = FilenamePattern("loose", re.compile(r"^(.+?)\s*\{(.{4})\}"), _delimited)
        parser = PatternFilenameParser(patterns=(pattern,))

        assert parser.parse("Film {19xx}.mkv") == ParsedGuess("Film", 0)

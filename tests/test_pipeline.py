# -*- coding: utf-8 -*-
"""
Integration tests for the pipeline orchestrator, configuration, logging
and the command-line entry point.
"""

import json
import logging

import pytest

from config import (Config, DecisionPosture, DisplayMode, PathConfig,
                    get_config, reset_config, set_config)
from loggers import ConsoleLogger, DebugLogger, log_exceptions, log_execution, log_context
from loggers.context import Colors, LogContext
from main import main
from mcdm.exceptions import IntegrityError
from mcdm.fuzzy import LinguisticTermRegistry, TriangularFuzzyNumber
from pipeline import FuzzyMCDMPipeline, PipelineResult
from session import DecisionSession


@pytest.fixture()
def tmp_config(tmp_path):
    return Config(paths=PathConfig(base_dir=tmp_path))


# ---------------------------------------------------------------------------
# TestConfig
# ---------------------------------------------------------------------------

class TestConfig:
    def test_to_dict_serialises_enums(self, tmp_config):
        d = tmp_config.to_dict()
        assert d["ranking"]["posture"] == "neutral"
        assert d["ranking"]["display_mode"] == "triangular"
        assert d["rating"]["policy"] == "first_term"
        assert d["defaults"]["linguistic_terms"]["Medium"] == [2, 3, 4]

    def test_save_round_trips_json(self, tmp_config, tmp_path):
        path = tmp_path / "config.json"
        tmp_config.save(path)
        with open(path, encoding="utf-8") as fh:
            loaded = json.load(fh)
        assert loaded["defaults"]["alternatives"][0] == "iPhone 17"

    def test_summary_mentions_posture(self, tmp_config):
        tmp_config.ranking.posture = DecisionPosture.PESSIMISTIC
        assert "pessimistic" in tmp_config.summary()

    def test_no_directories_created_on_construction(self, tmp_path):
        Config(paths=PathConfig(base_dir=tmp_path))
        assert not (tmp_path / "result").exists()

    def test_global_singleton(self, tmp_config):
        set_config(tmp_config)
        assert get_config() is tmp_config
        reset_config()
        assert get_config() is not tmp_config


# ---------------------------------------------------------------------------
# TestPipeline
# ---------------------------------------------------------------------------

class TestPipeline:
    def test_default_run(self, tmp_config, capsys):
        pipeline = FuzzyMCDMPipeline(tmp_config, use_color=False)
        result = pipeline.run()
        assert isinstance(result, PipelineResult)
        assert len(result.ranking) == 5
        assert result.ranking.order == result.session.alternatives
        assert abs(result.weights.total - 1.0) < 1e-9
        assert result.terms_normalized is False
        assert [p.status for p in pipeline.console.phases] == ["completed"] * 3

        out = capsys.readouterr().out
        assert "FUZZY LINGUISTIC MCDM" in out
        assert "Aggregation & Ranking" in out

    def test_debug_log_written(self, tmp_config):
        result = FuzzyMCDMPipeline(tmp_config, use_color=False).run()
        with open(result.debug_log_path, encoding="utf-8") as fh:
            entries = json.load(fh)
        labels = {e["message"] for e in entries if e["level"] == "DATA"}
        assert {"linguistic_terms", "weights", "ratings", "ranking"} <= labels
        entry = next(e for e in entries if e["message"] == "ranking")
        assert entry["phase"] == "Aggregation & Ranking"
        assert entry["context"] == {"posture": "neutral"}
        assert entry["data"][0]["rank"] == 1
        assert len(entry["data"][0]["tfn"]) == 3
        timings = next(e for e in entries if e["message"] == "phase_timings")["data"]
        assert [t["status"] for t in timings] == ["completed"] * 3

    def test_normalize_terms(self, tmp_config):
        tmp_config.ranking.normalize_terms = True
        result = FuzzyMCDMPipeline(tmp_config, use_color=False).run()
        assert result.terms_normalized is True
        values = [v for _, t in result.session.registry.items() for v in t.as_tuple()]
        assert min(values) == 0.0 and max(values) == 1.0

    def test_degenerate_normalization_is_skipped(self, tmp_config, capsys):
        tmp_config.ranking.normalize_terms = True
        session = DecisionSession(registry=LinguisticTermRegistry({"X": (5, 5, 5)}),
                                  criteria=["Only"])
        session.add_alternative("Alt1")
        result = FuzzyMCDMPipeline(tmp_config, use_color=False).run(session)
        assert result.terms_normalized is False
        assert result.session.registry.get("X").as_tuple() == (5.0, 5.0, 5.0)
        assert result.ranking.winner.score == 5.0
        assert "Normalization skipped" in capsys.readouterr().out

    def test_caller_session_and_posture(self, tmp_config):
        registry = LinguisticTermRegistry({"Low": (0, 1, 2), "High": (4, 5, 6)})
        session = DecisionSession(registry=registry, criteria=["C1", "C2"],
                                  posture="optimistic")
        session.add_alternative("A", ["Low", "High"])
        session.add_alternative("B", ["High", "High"])
        result = FuzzyMCDMPipeline(tmp_config, use_color=False).run(session)
        assert result.ranking.posture is DecisionPosture.OPTIMISTIC
        assert result.ranking.order == ["B", "A"]
        assert result.ranking.winner.score == 6.0

    def test_failure_is_logged_and_raised(self, tmp_config, monkeypatch):
        session = DecisionSession.from_config(tmp_config)

        def broken_ranking(posture=None):
            raise IntegrityError("rating references a removed term")

        monkeypatch.setattr(session, "ranking", broken_ranking)
        pipeline = FuzzyMCDMPipeline(tmp_config, use_color=False)
        with pytest.raises(IntegrityError):
            pipeline.run(session)
        assert pipeline.console.phases[-1].status == "failed"
        with open(pipeline.debug_log.path, encoding="utf-8") as fh:
            entries = json.load(fh)
        assert any(e["level"] == "ERROR" for e in entries)


# ---------------------------------------------------------------------------
# TestLoggers
# ---------------------------------------------------------------------------

class TestLoggers:
    def test_console_without_color(self, capsys):
        console = ConsoleLogger(use_color=False)
        console.warning("careful")
        out = capsys.readouterr().out
        assert "careful" in out
        assert Colors.strip(out) == out

    def test_debug_logger_intercepts_stdlib(self, tmp_path):
        debug = DebugLogger(output_dir=str(tmp_path / "logs"))
        logging.getLogger("fuzzy_mcdm").info("hello from the library")
        debug.log_data("tfn", TriangularFuzzyNumber(0, 1, 2))
        path = debug.close()
        with open(path, encoding="utf-8") as fh:
            entries = json.load(fh)
        assert entries[0]["message"] == "hello from the library"
        assert entries[1]["data"] == [0.0, 1.0, 2.0]

    def test_debug_logger_restores_level_on_close(self, tmp_path):
        lib_logger = logging.getLogger("fuzzy_mcdm")
        original = lib_logger.level
        lib_logger.setLevel(logging.WARNING)
        try:
            debug = DebugLogger(output_dir=str(tmp_path / "logs"))
            assert lib_logger.level == logging.DEBUG
            debug.close()
            assert lib_logger.level == logging.WARNING
            assert not any(type(h).__name__ == "_InterceptHandler"
                           for h in lib_logger.handlers)
        finally:
            lib_logger.setLevel(original)

    def test_log_exceptions_reraises(self, caplog):
        @log_exceptions()
        def boom():
            raise ValueError("bad")

        caplog.set_level(logging.ERROR, logger="fuzzy_mcdm")
        with pytest.raises(ValueError):
            boom()
        assert "Exception in" in caplog.text

    def test_log_execution_returns_result(self, caplog):
        @log_execution(show_result=True)
        def add(x, y):
            return x + y

        caplog.set_level(logging.DEBUG, logger="fuzzy_mcdm")
        assert add(2, 3) == 5
        assert "returned 5" in caplog.text

    def test_log_context_is_temporary(self):
        with log_context(posture="neutral"):
            assert LogContext.get()["posture"] == "neutral"
            with log_context(posture="optimistic"):
                assert LogContext.get()["posture"] == "optimistic"
            assert LogContext.get()["posture"] == "neutral"
        assert "posture" not in LogContext.get()

    def test_show_terms_table(self, capsys):
        ConsoleLogger(use_color=False).show_terms(LinguisticTermRegistry({"Low": (0, 1, 2)}), 1)
        out = capsys.readouterr().out
        assert "Low" in out and "2.0" in out


# ---------------------------------------------------------------------------
# TestMain
# ---------------------------------------------------------------------------

class TestMain:
    def test_main_prints_summary(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        main(["--posture", "optimistic", "--display", "interval"])
        out = capsys.readouterr().out
        assert "RESULTS SUMMARY" in out
        assert "iPhone 17" in out
        assert "optimistic" in out
        assert "[0.000, 1.000]" in out
        assert (tmp_path / "result" / "logs").is_dir()

    def test_main_random_ratings_with_seed(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        main(["--random-ratings", "--seed", "3", "--normalize"])
        assert "RESULTS SUMMARY" in capsys.readouterr().out

    def test_main_rejects_unknown_posture(self, capsys):
        with pytest.raises(SystemExit):
            main(["--posture", "reckless"])

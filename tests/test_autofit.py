"""Fit loop behaviour with scripted overflow readings and a stub rewrite step."""

import pytest

from newsfit.errors import MeasurementError, OracleError
from newsfit.events import AutoFitComplete, ErrorEvent, IterationStarted
from newsfit.layout.locator import detect_layout
from newsfit.pipeline.autofit import FitStatus, compute_target_words, run_auto_fit
from tests.helpers import StubHost


class StubAdjuster:
    def __init__(self, replies=None, fail_on_call=None):
        self.calls = []
        self.replies = replies or []
        self.fail_on_call = fail_on_call

    def __call__(self, content, current_words, target_words, needs_condensing):
        self.calls.append((content, current_words, target_words, needs_condensing))
        if self.fail_on_call == len(self.calls):
            raise OracleError("API request failed: 529 - overloaded")
        if self.replies:
            return self.replies[min(len(self.calls), len(self.replies)) - 1]
        return content + f"\n\nRewrite {len(self.calls)}."


def test_target_words_uses_height_ratio():
    assert compute_target_words(1000, 500, 100) == 833


def test_target_words_grows_when_column_has_room():
    # 500 / (500 - 100) = 1.25
    assert compute_target_words(400, 500, -100) == 500


def test_target_words_rejects_empty_column():
    with pytest.raises(MeasurementError):
        compute_target_words(100, 500, -500)


def test_converges_on_first_iteration_without_rewrite(article_frame, article, recorder):
    host = StubHost([0.0])
    adjuster = StubAdjuster()

    outcome = run_auto_fit(article, detect_layout(article_frame), host, adjuster, recorder)

    assert outcome.status == FitStatus.CONVERGED
    assert outcome.iterations == 1
    assert outcome.overflow == 0.0
    assert adjuster.calls == []
    assert recorder.of_type(AutoFitComplete) == [AutoFitComplete(iterations=1, overflow=0.0)]


def test_within_tolerance_counts_as_converged(article_frame, article, recorder):
    host = StubHost([-5.0])
    outcome = run_auto_fit(article, detect_layout(article_frame), host, StubAdjuster(), recorder)
    assert outcome.status == FitStatus.CONVERGED


def test_ceiling_runs_five_cycles_and_four_rewrites(article_frame, article, recorder):
    host = StubHost([40.0])
    adjuster = StubAdjuster()

    outcome = run_auto_fit(article, detect_layout(article_frame), host, adjuster, recorder)

    assert outcome.status == FitStatus.MAX_ITERATIONS_REACHED
    assert outcome.iterations == 5
    assert host.measure_calls == 5
    assert len(adjuster.calls) == 4
    assert outcome.adjust_calls == 4
    assert [e.iteration for e in recorder.of_type(IterationStarted)] == [1, 2, 3, 4, 5]
    assert recorder.of_type(AutoFitComplete) == [AutoFitComplete(iterations=5, overflow=40.0, max_reached=True)]


def test_last_fill_stays_in_place_after_ceiling(article_frame, article, recorder):
    host = StubHost([40.0])
    layout = detect_layout(article_frame)

    outcome = run_auto_fit(article, layout, host, StubAdjuster(), recorder)

    assert outcome.body.endswith("Rewrite 4.")
    written = "\n\n".join(c.characters for c in layout.columns if c.characters)
    assert written == f"{article.dateline}\n\n{outcome.body}"


def test_rewrite_direction_and_target(article_frame, article, recorder):
    host = StubHost([100.0, -50.0, 0.0])
    adjuster = StubAdjuster(replies=["one two three", "one two three four five six"])
    layout = detect_layout(article_frame)

    outcome = run_auto_fit(article, layout, host, adjuster, recorder)

    assert outcome.status == FitStatus.CONVERGED
    assert outcome.iterations == 3
    assert outcome.body == "one two three four five six"

    first, second = adjuster.calls
    # body has 9 words; column height 500 -> 500/600
    assert first[1:] == (9, 7, True)
    assert first[0] == article.body
    # 3 words; 500/450
    assert second[1:] == (3, 3, False)
    assert second[0] == "one two three"


def test_rewrite_failure_stops_run(article_frame, article, recorder):
    host = StubHost([30.0])
    adjuster = StubAdjuster(fail_on_call=2)

    outcome = run_auto_fit(article, detect_layout(article_frame), host, adjuster, recorder)

    assert outcome.status == FitStatus.FAILED
    assert outcome.iterations == 2
    assert "529" in outcome.error
    assert outcome.body.endswith("Rewrite 1.")
    assert [e.iteration for e in recorder.of_type(IterationStarted)] == [1, 2]
    assert recorder.of_type(ErrorEvent) == [ErrorEvent(message="Claude API error: API request failed: 529 - overloaded")]
    assert recorder.of_type(AutoFitComplete) == []


def test_measurement_failure_stops_run(article_frame, article, recorder):
    class BrokenHost(StubHost):
        def measure_overflow(self, node):
            raise MeasurementError("Font not available: Inter Regular")

    adjuster = StubAdjuster()
    outcome = run_auto_fit(article, detect_layout(article_frame), BrokenHost([0.0]), adjuster, recorder)

    assert outcome.status == FitStatus.FAILED
    assert outcome.iterations == 1
    assert adjuster.calls == []
    assert recorder.of_type(ErrorEvent)[0].message == "Font not available: Inter Regular"


def test_only_last_column_is_measured(article_frame, article, recorder):
    measured = []

    class RecordingHost(StubHost):
        def measure_overflow(self, node):
            measured.append(node.x)
            return 0.0

    run_auto_fit(article, detect_layout(article_frame), RecordingHost([0.0]), StubAdjuster(), recorder)
    assert measured == [400]


def test_columns_written_in_order_each_iteration(article_frame, article, recorder):
    host = StubHost([20.0, 0.0])
    run_auto_fit(article, detect_layout(article_frame), host, StubAdjuster(), recorder)

    xs = [x for _, x, _ in host.writes]
    assert xs == [0, 200, 400, 0, 200, 400]


def test_requires_columns(article, recorder):
    from newsfit.layout.locator import ArticleLayout

    with pytest.raises(ValueError):
        run_auto_fit(article, ArticleLayout(), StubHost([0.0]), StubAdjuster(), recorder)


def test_sdk_failure_in_rewrite_ends_run_as_failed(article_frame, article, recorder):
    from functools import partial
    from types import SimpleNamespace

    import anthropic
    import httpx

    from newsfit.pipeline.adjuster import adjust_length

    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")

    def create(**kwargs):
        raise anthropic.APIResponseValidationError(response=httpx.Response(200, request=request), body=None)

    client = SimpleNamespace(messages=SimpleNamespace(create=create))
    adjust = partial(adjust_length, client)

    outcome = run_auto_fit(article, detect_layout(article_frame), StubHost([25.0]), adjust, recorder)

    assert outcome.status == FitStatus.FAILED
    assert outcome.iterations == 1
    assert outcome.body == article.body
    errors = recorder.of_type(ErrorEvent)
    assert len(errors) == 1
    assert errors[0].message.startswith("Claude API error: API request failed")
    assert recorder.of_type(AutoFitComplete) == []


def test_short_body_over_many_columns_explains_failure(article_frame, recorder):
    from newsfit.document.host import DocumentHost
    from newsfit.loaders.article import ArticleContent

    # dateline + one paragraph over three columns leaves the last one empty
    content = ArticleContent(dateline="DURBAN", body="A single short paragraph.")
    adjuster = StubAdjuster()

    outcome = run_auto_fit(content, detect_layout(article_frame), DocumentHost(), adjuster, recorder)

    assert outcome.status == FitStatus.FAILED
    assert outcome.iterations == 1
    assert adjuster.calls == []
    assert "add body text or use a frame with fewer columns" in outcome.error
    assert recorder.of_type(ErrorEvent)[0].message == outcome.error

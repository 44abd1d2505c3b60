from nbfc.trace import Trace


def test_single_push():
    trace = Trace()
    trace.push("nbfc.json")
    assert str(trace) == "nbfc.json"


def test_nested_push_and_pop():
    trace = Trace()
    trace.push("nbfc.json")
    trace.push("TargetFanSpeeds[0]")
    assert str(trace) == "nbfc.json: TargetFanSpeeds[0]"
    trace.pop()
    assert str(trace) == "nbfc.json"
    trace.push("FanTemperatureSources[1]")
    assert str(trace).endswith("FanTemperatureSources[1]")
    assert str(trace).startswith("nbfc.json")


def test_pop_on_empty_trace():
    trace = Trace()
    trace.pop()
    assert str(trace) == ""


def test_pop_everything_returns_to_empty():
    trace = Trace()
    for label in ("a", "b", "c"):
        trace.push(label)
    for _ in range(3):
        trace.pop()
    assert str(trace) == ""


def test_depth_is_limited():
    trace = Trace()
    for i in range(Trace.MAX_DEPTH + 8):
        trace.push(f"l{i}")
    parts = str(trace).split(": ")
    assert len(parts) == Trace.MAX_DEPTH
    assert parts[-1] == f"l{Trace.MAX_DEPTH - 1}"


def test_length_is_limited():
    trace = Trace()
    trace.push("file")
    trace.push("x" * 5000)
    text = str(trace)
    assert len(text) <= Trace.MAX_LENGTH
    assert text.startswith("file")
    trace.pop()
    assert str(trace) == "file"
from libnamekit.host import InMemoryHost
from libnamekit.status import StatusSink


def test_status_sink_publish_replaces_content() -> None:
    host = InMemoryHost()
    sink = StatusSink(host)

    sink.publish("NAME-AS", "first", reveal=False)
    sink.publish("NAME-AS", "second", reveal=False)

    assert host.channels["NAME-AS"].text == "second"
    assert sink.last_rendered("NAME-AS") == "second"
    assert host.channels["NAME-AS"].reveals == 0


def test_status_sink_reveal() -> None:
    host = InMemoryHost()
    sink = StatusSink(host)

    sink.publish("NAME-LD", "linked", reveal=True)
    assert host.channels["NAME-LD"].reveals == 1


def test_status_sink_channels_are_separate() -> None:
    host = InMemoryHost()
    sink = StatusSink(host)

    sink.publish("NAME-AS", "assembler", reveal=False)
    sink.publish("NAME-LD", "linker", reveal=False)

    assert sink.last_rendered("NAME-AS") == "assembler"
    assert sink.last_rendered("NAME-LD") == "linker"
    assert sink.last_rendered("NAME-EMU") is None

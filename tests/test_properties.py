from sonyhpclient.properties import (
    EqualizerConfig,
    EventType,
    HeadphonesEvent,
    Playback,
    Property,
    ReadonlyProperty,
)


def test_property_starts_fulfilled_with_single_value():
    prop = Property(7)
    assert prop.desired == 7
    assert prop.is_fulfilled() is True
    assert prop.is_pending() is False


def test_changed_desired_is_not_fulfilled_until_fulfill():
    prop = Property(0)
    prop.desired = 12
    assert prop.is_fulfilled() is False
    prop.fulfill()
    assert prop.current == 12
    assert prop.is_fulfilled() is True


def test_pending_flag_cleared_by_fulfill_and_overwrite():
    prop = Property(False)
    prop.flag_pending()
    assert prop.is_pending() is True
    prop.fulfill()
    assert prop.is_pending() is False
    prop.flag_pending()
    prop.overwrite(True)
    assert prop.is_pending() is False


def test_overwrite_sets_both_values():
    prop = Property("")
    prop.desired = "wanted"
    prop.overwrite("reported")
    assert prop.current == "reported"
    assert prop.desired == "reported"
    assert prop.is_fulfilled() is True


def test_fulfilled_equalizer_is_independent_of_desired():
    prop = Property(EqualizerConfig())
    prop.desired.bands[2] = 4
    assert prop.is_fulfilled() is False
    prop.fulfill()
    assert prop.current == prop.desired
    prop.desired.bands[2] = -3
    assert prop.current.bands[2] == 4
    assert prop.is_fulfilled() is False


def test_overwritten_value_is_independent_of_desired():
    reported = EqualizerConfig(1, [1, 2, 3, 4, 5])
    prop = Property(EqualizerConfig())
    prop.overwrite(reported)
    prop.desired.bass_level = -5
    assert prop.current.bass_level == 1
    assert prop.is_fulfilled() is False


def test_equalizer_defaults_to_five_flat_bands():
    eq = EqualizerConfig()
    assert eq.bass_level == 0
    assert eq.bands == [0, 0, 0, 0, 0]
    assert EqualizerConfig(2, [1, 1, 1, 1, 1]) != EqualizerConfig(2, [1, 1, 1, 1, 0])


def test_readonly_property_overwrite():
    prop = ReadonlyProperty(False)
    prop.overwrite(True)
    assert prop.current is True


def test_playback_defaults():
    playback = Playback()
    assert (playback.title, playback.album, playback.artist, playback.snd_pressure) == (
        "",
        "",
        "",
        0,
    )


def test_default_event_is_none():
    event = HeadphonesEvent()
    assert event.type is EventType.NONE
    assert event.message == ""
    tagged = HeadphonesEvent(EventType.HEADPHONE_INTERACTION_EVENT, "key")
    assert tagged.type is EventType.HEADPHONE_INTERACTION_EVENT
    assert tagged.message == "key"
import pytest
from dashgrid.enums import EventType
from dashgrid.events import event_from_dict, StartResize, EndMove, UpdatePanelData, EVENT_REGISTRY

def test_every_event_type_has_a_record_class():
    assert set(EVENT_REGISTRY) == set(EventType)

def test_event_from_dict():
    assert event_from_dict({'type': 'START_RESIZE', 'x': 2, 'y': 1}) == StartResize(2, 1)

def test_event_from_dict_accepts_camel_case_start_keys():
    event = event_from_dict({'type': 'END_MOVE', 'x': 2, 'y': 2, 'startX': 2, 'startY': 1})
    assert event == EndMove(x=2, y=2, start_x=2, start_y=1)
    assert event.type is EventType.END_MOVE

def test_event_from_dict_ignores_extra_keys():
    event = event_from_dict({'type': 'UPDATE_PANEL_DATA', 'x': 1, 'y': 1, 'data': {'a': 1}, 'title': 'x'})
    assert event == UpdatePanelData(1, 1, {'a': 1})

@pytest.mark.parametrize("record", [
    {'x': 1, 'y': 1},
    {'type': 'OPEN_MODAL', 'x': 1},
    {'type': 'END_RESIZE', 'x': 1, 'y': 1},
])
def test_event_from_dict_rejects_malformed_records(record):
    with pytest.raises(ValueError):
        event_from_dict(record)

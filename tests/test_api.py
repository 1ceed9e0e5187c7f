"""Test the public API."""

import pytest

from decobox import (
    DEFAULT_OPTIONS, Box, ConfigurationError, Measurement,
    MeasurementUnavailable, RenderPlan)
from decobox.config.utils import Dimension

from .testing_utils import FakeHost, assert_no_logs, capture_logs, kinds

SCENARIO = {
    'frame': {'inset': 10},
    'title-style': {'boxed-style': {'anchor': {'x': 'left', 'y': 'horizon'}}},
    'shadow': {'offset': 4},
}


@assert_no_logs
def test_render(host):
    box = Box(SCENARIO, 'First', 'Second', title='Hello')
    plan = box.render(host)
    assert isinstance(plan, RenderPlan)
    assert host.painted == [plan]
    assert [content for content, _ in host.measured] == ['Hello']
    assert plan.reserved == 10
    title = plan.find('title')
    assert title.placement.dy == -10
    body_shadow, title_shadow = plan.regions_of('shadow')
    assert body_shadow.outset.top == -24
    assert title_shadow.outset.bottom == -20.5


@assert_no_logs
def test_two_phases(host):
    box = Box(SCENARIO, 'First', title='Hello')
    measurement = box.measure_title(host)
    assert measurement == Measurement(50, 20)
    style = host.measured[0][1]
    assert style.weight == 700
    assert style.inset.top == 10
    first, second = box.layout(measurement), box.layout(measurement)
    assert first is not second
    assert kinds(first) == kinds(second)
    assert len(host.measured) == 1


@assert_no_logs
def test_no_measurement_needed(host):
    box = Box(None, 'First', title='Title', footer='Footer')
    assert box.measure_title(host) is None
    assert host.measured == []
    assert kinds(box.render(host)) == [
        'outer', 'body', 'title', 'content', 'item', 'footer']
    assert host.measured == []


@assert_no_logs
def test_configuration_error_before_measurement(host):
    with pytest.raises(ConfigurationError):
        Box({'title-style': {'boxed-style': {'anchor': {'x': 'middle'}}}},
            'First', title='Hello')
    with pytest.raises(ConfigurationError):
        Box({'frame': {'thickness': [1, 2]}}, 'First', title='Hello')
    with pytest.raises(ConfigurationError):
        Box({'shadow': {'offset': (1, 2, 3)}}, 'First', title='Hello')
    assert host.measured == []


@assert_no_logs
def test_measurement_unavailable():
    host = FakeHost()
    box = Box({'title-style': {'boxed-style': True}}, 'First', title='Unknown')
    with pytest.raises(MeasurementUnavailable):
        box.render(host)
    assert len(host.measured) == 1
    assert host.painted == []


@assert_no_logs
def test_layout_without_measurement():
    box = Box({'title-style': {'boxed-style': True}}, 'First', title='Hello')
    with pytest.raises(MeasurementUnavailable):
        box.layout()


@assert_no_logs
def test_independent_boxes(host):
    first = Box(SCENARIO, 'First', title='Hello').render(host)
    second = Box(None, 'First').render(host)
    assert first.find('shadow') is not None
    assert second.find('shadow') is None
    assert len(host.measured) == 1


@assert_no_logs
def test_default_options():
    box = Box()
    assert box.body == ()
    assert box.width == Dimension(100, '%')
    assert box.align == DEFAULT_OPTIONS['align']
    assert box.breakable is False
    assert box.spacing is box.above is box.below is None
    assert box.config.font_size == 11


@assert_no_logs
def test_options(host):
    box = Box(
        None, 'First', width='200pt', align='Center', breakable=True,
        spacing='1em', below=3, font_size=10)
    assert box.width == 200
    assert box.align == 'center'
    assert (box.spacing, box.above, box.below) == (10, 10, 3)
    assert box.config.sep.gutter == pytest.approx(6.5)
    plan = box.render(host)
    assert plan.breakable is True
    assert plan.root.above == 10
    assert plan.root.width == 200


@assert_no_logs
@pytest.mark.parametrize('options', (
    {'width': 'wide'},
    {'width': '-1pt'},
    {'align': 'justify'},
    {'spacing': 'far'},
    {'above': True},
    {'font_size': -2},
))
def test_invalid_options(options):
    with pytest.raises(ConfigurationError):
        Box(None, 'First', **options)


@assert_no_logs
def test_unknown_option():
    with pytest.raises(TypeError):
        Box(None, 'First', colour='red')


def test_unknown_key_logged(host):
    with capture_logs() as logs:
        Box({'frame': {'title-colour': 'red'}}, 'First').render(host)
    assert logs == ["WARNING: Ignored unknown key 'title_colour' in frame"]


def test_progress_logged(host):
    with capture_logs(progress=True) as logs:
        Box(SCENARIO, 'First', title='Hello').render(host)
    assert logs == [
        'INFO: Step 1 - Measuring title',
        'INFO: Step 2 - Laying out box',
        'INFO: Step 3 - Painting box',
    ]

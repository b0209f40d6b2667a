import logging
from collections.abc import Callable, Iterable
from functools import cache
from uuid import UUID

import cython

from osrm_adapter.models.maneuver import ManeuverModifier, ManeuverType
from osrm_adapter.models.osrm import (
    OSRMBannerContent,
    OSRMBannerInstruction,
    OSRMStep,
    OSRMVoiceInstruction,
)
from osrm_adapter.models.route import (
    LaneInfo,
    SpokenInstruction,
    VisualInstruction,
    VisualInstructionContent,
)

type UtteranceIdFactory = Callable[[], UUID]


@cache
def parse_maneuver_type(value: str | None) -> ManeuverType | None:
    if value is None:
        return None
    try:
        return ManeuverType(value)
    except ValueError:
        logging.warning('Unsupported maneuver type %r', value)
        return None


@cache
def parse_maneuver_modifier(value: str | None) -> ManeuverModifier | None:
    if value is None:
        return None
    try:
        return ManeuverModifier(value)
    except ValueError:
        logging.warning('Unsupported maneuver modifier %r', value)
        return None


def _lane_info(content: OSRMBannerContent) -> list[LaneInfo] | None:
    lanes = [
        LaneInfo(
            active=component.active or False,
            directions=component.directions or [],
            active_direction=component.active_direction,
        )
        for component in content.components
        if component.type == 'lane'
    ]
    return lanes or None


@cython.cfunc
def _content(content: OSRMBannerContent, *, with_lanes: cython.bint) -> VisualInstructionContent:
    return VisualInstructionContent(
        text=content.text,
        maneuver_type=parse_maneuver_type(content.type),
        maneuver_modifier=parse_maneuver_modifier(content.modifier),
        roundabout_exit_degrees=content.degrees,
        lane_info=_lane_info(content) if with_lanes else None,
    )


def normalize_visual_instructions(
    banners: Iterable[OSRMBannerInstruction],
) -> list[VisualInstruction]:
    """
    Convert banner instructions into visual instructions.

    Only the sub content carries lane information, and only when the banner
    has at least one lane component.
    """
    return [
        VisualInstruction(
            primary=_content(banner.primary, with_lanes=False),
            secondary=(
                _content(banner.secondary, with_lanes=False)
                if banner.secondary is not None
                else None
            ),
            sub=(
                _content(banner.sub, with_lanes=True)
                if banner.sub is not None
                else None
            ),
            trigger_distance=banner.distance_along_geometry,
        )
        for banner in banners
    ]


def normalize_spoken_instructions(
    voices: Iterable[OSRMVoiceInstruction],
    utterance_id_factory: UtteranceIdFactory,
) -> list[SpokenInstruction]:
    """Convert voice instructions into spoken instructions, each with a fresh utterance id."""
    return [
        SpokenInstruction(
            text=voice.announcement,
            ssml=voice.ssml_announcement,
            trigger_distance=voice.distance_along_geometry,
            utterance_id=utterance_id_factory(),
        )
        for voice in voices
    ]


def maneuver_instruction(step: OSRMStep) -> str:
    """
    Get the human readable instruction of a step.

    Valhalla and Mapbox provide the text themselves, plain OSRM only describes
    the maneuver, so the text is built from the maneuver and the road name.
    """
    maneuver = step.maneuver
    if maneuver.instruction is not None:
        return maneuver.instruction

    maneuver_id = _get_maneuver_id(maneuver.type, maneuver.modifier or '')
    template = _MANEUVER_ID_TO_TEXT_MAP.get(maneuver_id)
    if template is None:
        logging.warning('Unsupported OSRM maneuver id %r', maneuver_id)
        return ''

    name: str | None
    if step.name and step.ref is not None:
        name = f'{step.name} ({step.ref})'
    elif step.name:
        name = step.name
    else:
        name = step.ref

    if maneuver_id in {'rotary', 'roundabout'}:
        exit_num = maneuver.exit
        if exit_num is not None and 0 < exit_num <= 10:
            text = f'{template}, take the {_EXIT_ORDINALS[exit_num]} exit'
        elif exit_num is not None:
            text = f'{template}, take exit {exit_num}'
        else:
            text = template
        return f'{text} onto {name}' if name else text

    if maneuver_id in {'off ramp left', 'off ramp right'}:
        text = template
        if step.exits is not None:
            text += f' {step.exits}'
        if name:
            text += f' onto {name}'
        if step.destinations is not None:
            text += f' towards {step.destinations}'
        return text

    if maneuver_id in {'on ramp left', 'on ramp right'}:
        text = template
        if name:
            text += f' onto {name}'
        if step.destinations is not None:
            text += f' towards {step.destinations}'
        return text

    if maneuver_id == 'arrive':
        return template

    if maneuver_id == 'depart':
        return f'{template} on {name}' if name else template

    return f'{template} onto {name}' if name else template


@cache
def _get_maneuver_id(type: str, modifier: str) -> str:
    if type in {'on ramp', 'off ramp', 'merge', 'end of road', 'fork'}:
        direction = 'left' if 'left' in modifier else 'right'
        return f'{type} {direction}'
    if type in {
        'depart',
        'arrive',
        'rotary',
        'roundabout',
        'exit rotary',
        'exit roundabout',
    }:
        return type
    if type in {'continue', 'new name', 'notification'} and not modifier:
        return 'continue'
    return f'turn {modifier or "straight"}'


_MANEUVER_ID_TO_TEXT_MAP = {
    'continue': 'Continue',
    'merge right': 'Merge right',
    'merge left': 'Merge left',
    'off ramp right': 'Take the exit on the right',
    'off ramp left': 'Take the exit on the left',
    'on ramp right': 'Take the ramp on the right',
    'on ramp left': 'Take the ramp on the left',
    'fork right': 'Keep right at the fork',
    'fork left': 'Keep left at the fork',
    'end of road right': 'Turn right at the end of the road',
    'end of road left': 'Turn left at the end of the road',
    'turn straight': 'Continue straight',
    'turn slight right': 'Turn slight right',
    'turn right': 'Turn right',
    'turn sharp right': 'Turn sharp right',
    'turn uturn': 'Make a U-turn',
    'turn sharp left': 'Turn sharp left',
    'turn left': 'Turn left',
    'turn slight left': 'Turn slight left',
    'roundabout': 'Enter the roundabout',
    'rotary': 'Enter the roundabout',
    'exit roundabout': 'Exit the roundabout',
    'exit rotary': 'Exit the roundabout',
    'depart': 'Start',
    'arrive': 'You have arrived at your destination',
}

_EXIT_ORDINALS = [
    '',  # zero case
    'first',
    'second',
    'third',
    'fourth',
    'fifth',
    'sixth',
    'seventh',
    'eighth',
    'ninth',
    'tenth',
]

from enum import StrEnum

# OSRM API Documentation:
# https://project-osrm.org/docs/v5.24.0/api/#stepmaneuver-object


class ManeuverType(StrEnum):
    turn = 'turn'
    new_name = 'new name'
    depart = 'depart'
    arrive = 'arrive'
    merge = 'merge'
    on_ramp = 'on ramp'
    off_ramp = 'off ramp'
    fork = 'fork'
    end_of_road = 'end of road'
    continue_ = 'continue'
    roundabout = 'roundabout'
    rotary = 'rotary'
    roundabout_turn = 'roundabout turn'
    notification = 'notification'
    exit_roundabout = 'exit roundabout'
    exit_rotary = 'exit rotary'


class ManeuverModifier(StrEnum):
    uturn = 'uturn'
    sharp_right = 'sharp right'
    right = 'right'
    slight_right = 'slight right'
    straight = 'straight'
    slight_left = 'slight left'
    left = 'left'
    sharp_left = 'sharp left'

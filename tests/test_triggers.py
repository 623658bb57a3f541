import pygame

from bouncers.triggers import FrameTriggers, ScriptedTriggers, triggers_from_events


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_scripted_triggers_fire_on_their_frames():
    triggers = ScriptedTriggers(add_frames=[0, 2], report_frames=[2])
    assert triggers.poll(0) == FrameTriggers(add=True)
    assert triggers.poll(1) == FrameTriggers()
    assert triggers.poll(2) == FrameTriggers(add=True, report=True)


def test_no_events_no_triggers():
    assert triggers_from_events([]) == (FrameTriggers(), False)


def test_keys_map_to_triggers():
    triggers, quit_requested = triggers_from_events([key(pygame.K_a), key(pygame.K_x)])
    assert triggers == FrameTriggers(add=True, report=True)
    assert not quit_requested


def test_key_release_is_not_a_trigger():
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_a)
    assert triggers_from_events([event]) == (FrameTriggers(), False)


def test_quit_requests():
    assert triggers_from_events([pygame.event.Event(pygame.QUIT)])[1]
    assert triggers_from_events([key(pygame.K_ESCAPE)])[1]

"""Keyboard key codes, using the virtual-key numbering of the host window system."""

from __future__ import annotations

import enum


class KeyCode(enum.IntEnum):
    """Keyboard key codes."""

    SPACE = 0x20
    APOSTROPHE = 0xDE
    COMMA = 0xBC
    MINUS = 0xBD
    PERIOD = 0xBE
    SLASH = 0xBF

    D0 = ord("0")
    D1 = ord("1")
    D2 = ord("2")
    D3 = ord("3")
    D4 = ord("4")
    D5 = ord("5")
    D6 = ord("6")
    D7 = ord("7")
    D8 = ord("8")
    D9 = ord("9")

    A = ord("A")
    B = ord("B")
    C = ord("C")
    D = ord("D")
    E = ord("E")
    F = ord("F")
    G = ord("G")
    H = ord("H")
    I = ord("I")  # noqa: E741
    J = ord("J")
    K = ord("K")
    L = ord("L")
    M = ord("M")
    N = ord("N")
    O = ord("O")  # noqa: E741
    P = ord("P")
    Q = ord("Q")
    R = ord("R")
    S = ord("S")
    T = ord("T")
    U = ord("U")
    V = ord("V")
    W = ord("W")
    X = ord("X")
    Y = ord("Y")
    Z = ord("Z")

    SEMICOLON = 0xBA
    EQUAL = 0xBB
    LEFT_BRACKET = 0xDB
    BACKSLASH = 0xDC
    RIGHT_BRACKET = 0xDD
    GRAVE_ACCENT = 0xC0

    ESCAPE = 0x1B
    ENTER = 0x0D
    TAB = 0x09
    BACKSPACE = 0x08
    INSERT = 0x2D
    DELETE = 0x2E
    RIGHT = 0x27
    LEFT = 0x25
    DOWN = 0x28
    UP = 0x26
    PAGE_UP = 0x21
    PAGE_DOWN = 0x22
    HOME = 0x24
    END = 0x23
    CAPS_LOCK = 0x14
    SCROLL_LOCK = 0x91
    NUM_LOCK = 0x90
    PRINT_SCREEN = 0x2C
    PAUSE = 0x13

    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    F13 = 0x7C
    F14 = 0x7D
    F15 = 0x7E
    F16 = 0x7F
    F17 = 0x80
    F18 = 0x81
    F19 = 0x82
    F20 = 0x83
    F21 = 0x84
    F22 = 0x85
    F23 = 0x86
    F24 = 0x87

    KP0 = 0x60
    KP1 = 0x61
    KP2 = 0x62
    KP3 = 0x63
    KP4 = 0x64
    KP5 = 0x65
    KP6 = 0x66
    KP7 = 0x67
    KP8 = 0x68
    KP9 = 0x69
    KP_DECIMAL = 0x6E
    KP_DIVIDE = 0x6F
    KP_MULTIPLY = 0x6A
    KP_SUBTRACT = 0x6D
    KP_ADD = 0x6B
    KP_ENTER = 0x0D  # shares the main Enter key's code
    KP_EQUAL = 0xBB  # shares the main Equal key's code

    LEFT_SHIFT = 0xA0
    LEFT_CONTROL = 0xA2
    LEFT_ALT = 0xA4
    LEFT_SUPER = 0x5B
    RIGHT_SHIFT = 0xA1
    RIGHT_CONTROL = 0xA3
    RIGHT_ALT = 0xA5
    RIGHT_SUPER = 0x5C
    MENU = 0x5D
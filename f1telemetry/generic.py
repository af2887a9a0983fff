"""Enumerations shared by several packet kinds, and their decoders."""

from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from .base import UnpackError

E = TypeVar("E", bound=Enum)


class Flag(Enum):
    NONE = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3
    RED = 4
    INVALID = -1


class Nationality(Enum):
    INVALID = 0
    AMERICAN = 1
    ARGENTINEAN = 2
    AUSTRALIAN = 3
    AUSTRIAN = 4
    AZERBAIJANI = 5
    BAHRAINI = 6
    BELGIAN = 7
    BOLIVIAN = 8
    BRAZILIAN = 9
    BRITISH = 10
    BULGARIAN = 11
    CAMEROONIAN = 12
    CANADIAN = 13
    CHILEAN = 14
    CHINESE = 15
    COLOMBIAN = 16
    COSTA_RICAN = 17
    CROATIAN = 18
    CYPRIOT = 19
    CZECH = 20
    DANISH = 21
    DUTCH = 22
    ECUADORIAN = 23
    ENGLISH = 24
    EMIRIAN = 25
    ESTONIAN = 26
    FINNISH = 27
    FRENCH = 28
    GERMAN = 29
    GHANAIAN = 30
    GREEK = 31
    GUATEMALAN = 32
    HONDURAN = 33
    HONG_KONGER = 34
    HUNGARIAN = 35
    ICELANDER = 36
    INDIAN = 37
    INDONESIAN = 38
    IRISH = 39
    ISRAELI = 40
    ITALIAN = 41
    JAMAICAN = 42
    JAPANESE = 43
    JORDANIAN = 44
    KUWAITI = 45
    LATVIAN = 46
    LEBANESE = 47
    LITHUANIAN = 48
    LUXEMBOURGER = 49
    MALAYSIAN = 50
    MALTESE = 51
    MEXICAN = 52
    MONEGASQUE = 53
    NEW_ZEALANDER = 54
    NICARAGUAN = 55
    NORTHERN_IRISH = 56
    NORWEGIAN = 57
    OMANI = 58
    PAKISTANI = 59
    PANAMANIAN = 60
    PARAGUAYAN = 61
    PERUVIAN = 62
    POLISH = 63
    PORTUGUESE = 64
    QATARI = 65
    ROMANIAN = 66
    RUSSIAN = 67
    SALVADORAN = 68
    SAUDI = 69
    SCOTTISH = 70
    SERBIAN = 71
    SINGAPOREAN = 72
    SLOVAKIAN = 73
    SLOVENIAN = 74
    SOUTH_KOREAN = 75
    SOUTH_AFRICAN = 76
    SPANISH = 77
    SWEDISH = 78
    SWISS = 79
    THAI = 80
    TURKISH = 81
    URUGUAYAN = 82
    UKRAINIAN = 83
    VENEZUELAN = 84
    BARBADIAN = 85
    WELSH = 86
    VIETNAMESE = 87


class Team(Enum):
    MERCEDES = 0
    FERRARI = 1
    RED_BULL_RACING = 2
    WILLIAMS = 3
    ASTON_MARTIN = 4
    ALPINE = 5
    ALPHA_TAURI = 6
    HAAS = 7
    MCLAREN = 8
    ALFA_ROMEO = 9
    MERCEDES_2020 = 85
    FERRARI_2020 = 86
    RED_BULL_2020 = 87
    WILLIAMS_2020 = 88
    RACING_POINT_2020 = 89
    RENAULT_2020 = 90
    ALPHA_TAURI_2020 = 91
    HAAS_2020 = 92
    MCLAREN_2020 = 93
    ALFA_ROMEO_2020 = 94
    ASTON_MARTIN_DB11_V12 = 95
    ASTON_MARTIN_VANTAGE_F1_EDITION = 96
    ASTON_MARTIN_VANTAGE_SAFETY_CAR = 97
    FERRARI_F8_TRIBUTO = 98
    FERRARI_ROMA = 99
    MCLAREN_720S = 100
    MCLAREN_ARTURA = 101
    MERCEDES_AMG_GT_BLACK_SERIES_SAFETY_CAR = 102
    MERCEDES_AMG_GTR_PRO = 103
    F1_CUSTOM_TEAM = 104
    PREMA_2021 = 106
    UNI_VIRTUOSI_2021 = 107
    CARLIN_2021 = 108
    HITECH_2021 = 109
    ART_GP_2021 = 110
    MP_MOTORSPORT_2021 = 111
    CHAROUZ_2021 = 112
    DAMS_2021 = 113
    CAMPOS_2021 = 114
    BWT_2021 = 115
    TRIDENT_2021 = 116
    MERCEDES_AMG_GT_BLACK_SERIES = 117
    MY_TEAM = 255


class ResultStatus(Enum):
    INVALID = 0
    INACTIVE = 1
    ACTIVE = 2
    FINISHED = 3
    DID_NOT_FINISH = 4
    DISQUALIFIED = 5
    NOT_CLASSIFIED = 6
    RETIRED = 7


class TyreCompound(Enum):
    INVALID = 0
    INTER = 7
    WET = 8
    CLASSIC_DRY = 9
    CLASSIC_WET = 10
    F2_SUPER_SOFT = 11
    F2_SOFT = 12
    F2_MEDIUM = 13
    F2_HARD = 14
    F2_WET = 15
    C5 = 16
    C4 = 17
    C3 = 18
    C2 = 19
    C1 = 20


class TyreCompoundVisual(Enum):
    INVALID = 0
    INTER = 7
    WET = 8
    CLASSIC_DRY = 9
    CLASSIC_WET = 10
    F2_WET = 15
    SOFT = 16
    MEDIUM = 17
    HARD = 18
    F2_SUPER_SOFT = 19
    F2_SOFT = 20
    F2_MEDIUM = 21
    F2_HARD = 22


def _unpack(enum_cls: Type[E], value: int, label: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise UnpackError(f"Invalid {label} value: {value}") from None


def unpack_flag(value: int) -> Flag:
    """Decode a signed flag byte."""
    return _unpack(Flag, value, "Flag")


def unpack_nationality(value: int) -> Nationality:
    """Decode a nationality byte; 0 and 255 both mean invalid."""
    if value == 255:
        return Nationality.INVALID
    return _unpack(Nationality, value, "Nationality")


def unpack_team(value: int) -> Team:
    """Decode a team identifier."""
    return _unpack(Team, value, "Team")


def unpack_result_status(value: int) -> ResultStatus:
    """Decode a result status byte."""
    return _unpack(ResultStatus, value, "ResultStatus")


def unpack_tyre_compound(value: int) -> TyreCompound:
    """Decode an actual tyre compound; 0 and 255 both mean invalid."""
    if value == 255:
        return TyreCompound.INVALID
    return _unpack(TyreCompound, value, "TyreCompound")


def unpack_tyre_compound_visual(value: int) -> TyreCompoundVisual:
    """Decode a visual tyre compound."""
    return _unpack(TyreCompoundVisual, value, "TyreCompoundVisual")
"""Remapping of disc serials to the serials used for artwork and metadata."""

from __future__ import annotations

_BOTH = (
    # PAL regional duplicates
    ("T13001D05", "T13001D"),
    ("T8111D58", "T8111D50"),
    ("T45001D09", "T45001D05"),
    ("T45001D18", "T45001D05"),
    ("T45002D09", "T45002D05"),
    ("T36815D06", "T36804D05"),
    ("T36815D13", "T36804D05"),
    ("T36815D18", "T36804D05"),
    ("MK5109506", "MK5109505"),
    ("MK5109509", "MK5109505"),
    ("MK5109518", "MK5109505"),
    ("T8103N18", "T8103N50"),
)

_META_ONLY = (
    # PAL missing meta
    ("T10001D", "T10004N"),
    ("MK5100450", "MK51004"),
    ("MK5117850", "MK51178"),
    ("T9713D", "T9709N"),
    ("T9705D50", "T9706N"),
    ("T9703D50", "T9703N"),
    ("T8102D", "T8101N"),
    ("MK5102550", "MK51025"),
    ("T9502D50", "T9504N"),
    ("MK5110250", "MK51102"),
    ("T7003D", "T1207N"),
    ("T17710D50", "T17713N"),
    ("T8106D50", "T31101N"),
    ("MK5106150", "MK51061"),
    ("T45006D50", "17701N"),
    ("17701D", "17701N"),
    ("17707D", "17707N"),
    ("T8107D", "T8109N"),
    ("T7012D", "T40218N"),
    ("MK5102151", "T40215N"),
    ("T7004D", "T1205N"),
    ("T7021D", "T1220N"),
    ("T22901D", "T22901N"),
    ("T9709D50", "T9707N"),
    ("MK5100650", "MK51006"),
    ("MK5105350", "MK51053"),
    ("MK5101950", "MK51019"),
    ("T8104D", "T8106N"),
    ("T9505D", "T9507N"),
    ("T15109D", "T15108N"),
    ("T15104D", "T15106N"),
    ("T17722D", "T40207N"),
    ("T17726D", "T40212N"),
    ("MK5100050", "MK51000"),
    ("MK5106050", "MK51060"),
    ("T1401D", "T1401N"),
    ("T41401D", "T41401N"),
    ("T8105D50", "T8105N"),
    ("T8112D50", "T8116N"),
    ("MK5105150", "MK51051"),
    ("T36816D", "T1216N"),
    ("T45004D", "T41704N"),
    ("T17702D", "T17702N"),
    ("T17713D", "T17718N"),
    ("T13011D50", "T13008N"),
    ("T8117D50", "T8118N"),
    ("T23001D", "T23001N"),
    ("T13010D", "T23003N"),
    ("T17723D", "T40209N"),
    ("T7005D", "T1203N"),
    ("T7013D50", "T1213N"),
    ("T7006D", "T1210N"),
    ("T17711D", "T17708N"),
    ("T40206D", "T40206N"),
    ("T17721D", "T40216N"),
    ("T17703D", "T17703N"),
    ("T36807D", "T36805N"),
    ("T36808D", "T36808N"),
    ("T7009D50", "T1208N"),
    ("T8108D", "T8108N"),
    ("T9503D", "T9512N"),
    ("MK5100250", "MK51002"),
    ("MK5101153", "MK51011"),
    ("T40201D", "T40202N"),
    ("T40210D", "T40211N"),
    ("T45001D05", "T40401N"),
    ("T45002D05", "T40402N"),
    ("T36815D05", "T36812N"),
    ("T36804D05", "T36806N"),
    ("T13008D", "T13006N"),
    ("T40204D", "T40205N"),
    ("MK5102050", "MK57020"),
    ("T8101D50", "T8102N"),
    ("T40203D", "T40204N"),
    ("T15113D", "T15125N"),
    ("T36810D", "T36810N"),
    ("T8110D50", "T8110N"),
    ("T13002D", "T13002N"),
    ("MK5109450", "T44301N"),
    ("MK5100150", "MK51001"),
    ("MK5102850", "MK51028"),
    ("MK5105450", "MK51054"),
    ("T15106D", "T15113N"),
    ("T36809D", "T36804N"),
    ("T40504D", "T8111N"),
    ("T40601D", "T40601N"),
    ("T7016D", "T22904N"),
    ("T8103N50", "T8103N"),
    ("T10003D", "T10005N"),
    # JAP missing meta
    ("HDR0054", "MK51053"),
    ("HDR0053", "MK51035"),
    ("HDR0159", "MK51136"),
    ("T3601M", "T3602M"),
    ("T3602M", "T3601N"),
    ("T40903M", "T40901M"),
    ("HDR0129", "MK51100"),
    ("HDR0163", "MK51193"),
    ("HDR0178", "MK5119250"),
    ("HDR0010", "MK51019"),
    ("HDR0063", "MK51092"),
    ("HDR0016", "MK5105950"),
    ("HDR0164", "MK5118450"),
    ("T30801M", "T40202N"),
    ("T30803M", "T40211N"),
    ("HDR0029", "MK51051"),
)

_ART_REMAP: dict[str, str] = dict(_BOTH)
_META_REMAP: dict[str, str] = {**dict(_BOTH), **dict(_META_ONLY)}


def sanitize_art(serial: str) -> str:
    """Return the serial under which a game's artwork is stored."""
    return _ART_REMAP.get(serial, serial)


def sanitize_meta(serial: str) -> str:
    """Return the serial under which a game's metadata is stored."""
    return _META_REMAP.get(serial, serial)
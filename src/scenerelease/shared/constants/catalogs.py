"""Token catalogs for release name parsing.

Every catalog is an ordered tuple. Extractors walk them top to bottom and
the first entry that matches wins, so the position of an entry is its
priority. Entries are either plain spellings (the spelling is also the
canonical output) or ``(spelling, canonical)`` pairs.
"""

from __future__ import annotations

from typing import Final

# Sources
SOURCES: Final[tuple[str, ...]] = (
    # DVD
    "DVDRip",
    "DVD-Rip",
    "DVDR",
    "DVD5",
    "DVD9",
    "DVD-R",
    # Web
    "WEB-DL",
    "WEBRip",
    "Web Rip",
    "Web Download",
    "WEB",
    "WEBDL",
    "AMZN WEBDL",
    "MA WEBDL",
    # TV
    "HDTV",
    "PDTV",
    "DSR",
    "SATRip",
    "TVRip",
    "iNTERNAL HDTV",
    "iNTERNAL",
    # Blu-ray
    "BluRay",
    "BDRip",
    "BRRip",
    "BD",
    # Other
    "VHSRip",
    "R5",
    "TC",
    "TS",
    "CAM",
    "SCR",
    "HDCAM",
    "TELESYNC",
    "TELECINE",
    "Remux",
    "Workprint",
    "WP",
    "PPV Rip",
    "PPVRip",
    "DDC",
    "VOD Rip",
    "VODRip",
    "HC HD Rip",
    "HCHDRip",
    "Web Capture",
    "HDRip",
    "DCP",
    "Theatre",
    "Theater",
)

# Bracketed "<source>-<resolution>" groups: (spellings found in the bracket, canonical)
BRACKET_SOURCE_RULES: Final[tuple[tuple[tuple[str, ...], str], ...]] = (
    (("MA WEBDL", "MA.WEBDL"), "MA WEBDL"),
    (("iNTERNAL",), "iNTERNAL"),
    (("AMZN WEBDL",), "WEBDL"),
    (("WEBDL", "WEB-DL"), "WEB-DL"),
    (("Bluray", "BluRay"), "BluRay"),
)

# Video formats
BRACKET_FORMATS: Final[tuple[str, ...]] = (
    "AVC",
    "h265",
    "h264",
    "HEVC",
    "H264",
    "x265",
    "x264",
)

FORMATS: Final[tuple[str, ...]] = (
    "SVCD",
    "VCD",
    "XviD",
    "DivX",
    "x264",
    "x265",
    "HEVC",
    "H264",
    "AVC",
    "MPEG2",
    "MPEG4",
    "h265",
    "h264",
)

# Audio, longest names first so "DTS-HD MA" wins over "DTS"
BRACKET_AUDIO: Final[tuple[str, ...]] = (
    "TrueHD",
    "DTS-HD MA",
    "DTS-HD",
    "DTS",
    "EAC3 Atmos",
    "EAC3",
    "AC3",
    "AAC",
    "MP3",
    "FLAC",
    "DDP",
    "Dolby Digital Plus",
)

AUDIO_FALLBACK: Final[tuple[str, ...]] = (
    "AC3",
    "DTS",
    "AAC",
    "MP3",
    "FLAC",
    "TrueHD",
    "DTS-HD",
    "DTS-HDMA",
    "DTS-HD MA",
    "EAC3",
    "EAC3 Atmos",
    "DD5.1",
    "DD2.0",
    "DDP5.1",
    "DDP2.0",
    "DDP",
    "Dolby Digital Plus",
)

# HDR: (spellings, canonical)
HDR_RULES: Final[tuple[tuple[tuple[str, ...], str], ...]] = (
    (("DV HDR10Plus", "DV.HDR10Plus"), "DV HDR10Plus"),
    (("HDR10Plus",), "HDR10Plus"),
    (("DV HDR10", "DV.HDR10"), "DV HDR10"),
    (("HDR10",), "HDR10"),
)

DEVICES: Final[tuple[str, ...]] = (
    "XBOX",
    "XBOX360",
    "XBOXONE",
    "PS2",
    "PS3",
    "PS4",
    "PS5",
    "Wii",
    "WiiU",
    "Switch",
    "PSP",
    "NDS",
    "3DS",
)

OPERATING_SYSTEMS: Final[tuple[str, ...]] = (
    "Linux",
    "Windows",
    "MacOS",
    "OSX",
    "Unix",
    "Android",
    "iOS",
    "WinXP",
    "Win7",
    "Win8",
    "Win10",
    "Win11",
)

# Languages
BRACKET_LANGUAGE_CODES: Final[tuple[tuple[str, str], ...]] = (
    ("DE", "German"),
    ("EN", "English"),
    ("FR", "French"),
    ("ES", "Spanish"),
    ("IT", "Italian"),
    ("PT", "Portuguese"),
    ("RU", "Russian"),
    ("NL", "Dutch"),
    ("PL", "Polish"),
    ("SV", "Swedish"),
    ("NO", "Norwegian"),
    ("DA", "Danish"),
    ("FI", "Finnish"),
    ("JA", "Japanese"),
    ("ZH", "Chinese"),
    ("KO", "Korean"),
    ("AR", "Arabic"),
    ("TR", "Turkish"),
)

# (spelling as written in release names, language code)
LANGUAGE_NAMES: Final[tuple[tuple[str, str], ...]] = (
    ("German", "de"),
    ("GERMAN", "de"),
    ("English", "en"),
    ("ENGLISH", "en"),
    ("French", "fr"),
    ("FRENCH", "fr"),
    ("Spanish", "es"),
    ("SPANISH", "es"),
    ("Italian", "it"),
    ("ITALIAN", "it"),
    ("iTALiAN", "it"),
    ("Portuguese", "pt"),
    ("PORTUGUESE", "pt"),
    ("Russian", "ru"),
    ("RUSSIAN", "ru"),
    ("Dutch", "nl"),
    ("DUTCH", "nl"),
    ("Polish", "pl"),
    ("POLISH", "pl"),
    ("Swedish", "sv"),
    ("SWEDiSH", "sv"),
    ("Norwegian", "no"),
    ("NORWEGiAN", "no"),
    ("NORDiC", "no"),
    ("Nordic", "no"),
    ("Danish", "da"),
    ("DANISH", "da"),
    ("Finnish", "fi"),
    ("FINNISH", "fi"),
    ("Japanese", "ja"),
    ("JAPANESE", "ja"),
    ("Chinese", "zh"),
    ("CHINESE", "zh"),
    ("Korean", "ko"),
    ("KOREAN", "ko"),
    ("Arabic", "ar"),
    ("ARABIC", "ar"),
    ("Turkish", "tr"),
    ("TURKISH", "tr"),
)

MULTILINGUAL_KEY: Final = "multi"
MULTILINGUAL_NAME: Final = "Multilingual"

# "(CA)" style region markers
COUNTRY_CODES: Final[tuple[tuple[str, str], ...]] = (
    ("CA", "Canadian"),
    ("US", "US"),
    ("UK", "UK"),
    ("AU", "Australian"),
    ("DE", "German"),
    ("FR", "French"),
    ("ES", "Spanish"),
    ("IT", "Italian"),
    ("JP", "Japanese"),
    ("CN", "Chinese"),
    ("KR", "Korean"),
)

# Flags: (canonical name, case-insensitive pattern)
FLAGS: Final[tuple[tuple[str, str], ...]] = (
    # Release quality
    ("READNFO", r"READ\.?NFO"),
    ("PROPER", r"\bPROPER\b"),
    ("REPACK", r"\bREPACK\b"),
    ("RERIP", r"\bRERIP\b"),
    ("INTERNAL", r"\bINTERNAL\b"),
    # Audio and subtitles
    ("TV Dubbed", r"TV\.?Dubbed"),
    ("Dubbed", r"\bDubbed\b"),
    ("Subbed", r"\bSubbed\b"),
    ("Hard Sub", r"(?:Hard\.?Sub|HardSub)"),
    ("MultiSub", r"MultiSub"),
    ("Multi-Subs", r"Multi-Subs"),
    # Editions
    ("Uncut", r"\bUncut\b"),
    ("Director's Cut", r"Director'?s\.?Cut"),
    ("Extended", r"\bExtended\b"),
    ("Limited", r"\bLimited\b"),
    ("Limited Edition", r"Limited\.?Edition"),
    ("Special Edition", r"Special\.?Edition"),
    ("Collector's Edition", r"Collector'?s\.?Edition"),
    ("Ultimate Edition", r"Ultimate\.?Edition"),
    # Video
    ("IMAX", r"\bIMAX\b"),
    ("IMAX HYBRID", r"IMAX\s+HYBRID"),
    ("3D", r"\b3D\b"),
    ("10bit", r"\b10bit\b"),
    ("REMASTERED", r"\bREMASTERED\b"),
    # Anime
    ("ANiME", r"\bANiME\b"),
    # Scene status
    ("NUKED", r"\bNUKED\b"),
    ("DUPE", r"\bDUPE\b"),
    ("RETAIL", r"\bRETAIL\b"),
    ("NFOFIX", r"\bNFOFIX\b"),
    ("COMPLETE", r"\bCOMPLETE\b"),
    ("FESTIVAL", r"\bFESTIVAL\b"),
    ("STV", r"\bSTV\b"),
)

# Streaming providers
STREAMING_PROVIDERS: Final[tuple[str, ...]] = (
    # International
    "9NOW", "A3P", "AE", "ABC", "AJAZ", "ALL4", "AMC", "AMZN", "Amazon",
    "Prime Video", "Prime", "ANLB", "ANPL", "APPS", "ARD", "AS", "ATVP",
    "Apple TV+", "AppleTV", "Apple", "AUBC", "BCORE", "BK", "BNGE", "BOOM",
    "BRAV", "CBC", "CBS", "CC", "CHGD", "CLBI", "CMAX", "Cinemax", "CMOR",
    "CMT", "CN", "CNBC", "CNLP", "COOK", "CR", "Crunchyroll", "CRAV", "CRIT",
    "CRKL", "CRKI", "CSPN", "CTV", "CUR", "CW", "CWS", "DCU", "DDY", "DEST",
    "DF", "DISC", "Discovery", "Discovery+", "Discovery Plus", "DIY", "DPLY",
    "DRPO", "DRTV", "DSCP", "DSNP", "Disney+", "DisneyPlus", "Disney", "DTV",
    "DW", "DLWP", "EPIX", "ESPN", "ESPN+", "ESPN Plus", "ESQ", "ETTV", "ETV",
    "FAH", "FAM", "FBWatch", "FJR", "FOOD", "FOX", "FPT", "FREE", "FTV",
    "FUNI", "Funimation", "FXTL", "FYI", "GC", "GLBL", "GLOB", "GLBO", "GO90",
    "GPLAY", "Google Play", "PLAY", "HBO", "HBO Max", "HMAX", "MAX", "Max",
    "HGTV", "HIDI", "HIDIVE", "HIST", "HLMK", "HPLAY", "HTSR", "HS", "HULU",
    "Hulu", "iP", "BBC iPlayer", "BBC", "iQIYI", "iT", "iTunes", "ITV",
    "ITVX", "JC", "KAYO", "KNOW", "KNPY", "KS", "LGP", "LIFE", "LN", "MA",
    "Movies Anywhere", "MBC", "MMAX", "MNBC", "MS", "Microsoft Store", "MTOD",
    "MTV", "MUBI", "MY5", "NATG", "NBA", "NBC", "NBLA", "NF", "Netflix", "NFL",
    "NFLN", "NICK", "NOW", "NRK", "ODK", "OPTO", "OSN", "OXGN", "PBS", "PBSK",
    "PCOK", "Peacock", "PLUZ", "PMNT", "PMTP", "Paramount+", "Paramount Plus",
    "Paramount", "POGO", "PSN", "PlayStation Network", "PUHU", "QIBI", "RED",
    "YouTube Premium", "YouTube Red", "RKTN", "ROKU", "RSTR", "RTE", "RTP",
    "RTPPLAY", "SAINA", "SP", "SBS", "SESO", "SHDR", "SHMI", "SHO", "Showtime",
    "Showtime Anytime", "SKST", "SkyShowtime", "SLNG", "SNET", "SNXT", "SPIK",
    "SPRT", "SS", "STAN", "STRP", "STZ", "STARZ", "Starz", "SVT", "SYFY", "TEN",
    "TIMV", "TK", "TLC", "TOU", "TRVL", "TUBI", "TV2", "TV3", "TV4", "TVING",
    "TVL", "TVNZ", "UFC", "UKTV", "UNIV", "USAN", "VH1", "VIAP", "Viaplay",
    "VICE", "VIKI", "VIU", "VLCT", "VMEO", "Vimeo", "VRV", "VTRN", "WAVVE",
    "WNET", "WTCH", "WWEN", "WWE Network", "XBOX", "Xbox Video", "YT",
    "YouTube", "YouTube Movies", "YouTube TV", "ZDF",
    # Japanese
    "ABMA", "ADN", "ANIMAX", "AO", "AT-X", "ATX", "Baha", "B-Global",
    "Bstation", "BSP", "NHK-BSP", "BS4", "BS5", "EX-BS", "BS-EX", "BS6", "BS7",
    "BSJ", "BS-TX", "BS8", "BS-Fuji", "BS11", "BS12", "CS-Fuji ONE", "CX",
    "DMM", "EX", "CS3", "EX-CS1", "CS-EX1", "CSA", "FOD", "FUNi", "KBC",
    "M-ON!", "MX", "NHKG", "NHKE", "NTV", "TBS", "TX", "UNXT", "U-NEXT", "WAKA",
    "Wakanim", "WOWOW", "Wowow", "YTV",
)  # fmt: skip

# Compound audio spellings hidden from the provider scan ("MA" in "DTS-HD MA")
PROVIDER_SCAN_MASKS: Final[tuple[str, ...]] = (r"DTS-?HD[\s.]?MA",)

# Release groups
LEADING_GROUP_EXCLUSIONS: Final[tuple[str, ...]] = (
    "AVC", "GB", "1080P", "720p", "WEB-DL", "WEBDL", "WEBRiP", "BluRay", "x264",
    "x265", "h264", "h265", "HEVC", "AAC", "AC3", "DTS", "MultiSub", "Multi-Subs",
)  # fmt: skip

TRAILING_GROUP_EXCLUSIONS: Final[tuple[str, ...]] = (
    *LEADING_GROUP_EXCLUSIONS,
    "H264",
    "AAC 2.0",
)

LEGACY_GROUP_EXCLUSIONS: Final[tuple[str, ...]] = (
    "DVDRip", "x264", "x265", "AC3", "DTS", "AAC", "MP3", "FLAC", "HEVC", "AVC",
)  # fmt: skip

# Title resolution
LANGUAGE_WORDS: Final[tuple[str, ...]] = (
    "German", "English", "French", "Spanish", "Italian", "Portuguese",
    "Russian", "Dutch", "Polish", "Swedish", "Norwegian", "Danish", "Finnish",
    "Japanese", "Chinese", "Korean", "Arabic", "Turkish", "NORDiC", "SWEDiSH",
    "NORWEGiAN", "GERMAN",
)  # fmt: skip

# Tokens that end a dot-separated episode title ("Title.S02E10.Episode.Title.German...")
EPISODE_TITLE_TERMINATORS: Final[tuple[str, ...]] = (
    *LANGUAGE_WORDS,
    "ANiME", "DL", "BluRay", "BDRip", "DVDRip", "WEB-DL", "HDTV", "1080p",
    "720p", "480p", "x264", "x265", "h264", "h265", "HEVC", "AVC",
)  # fmt: skip

# Tokens that end an episode title after an episode-only marker ("Show.E780.Title.1080p...")
EPISODE_ONLY_TITLE_TERMINATORS: Final[tuple[str, ...]] = (
    "1080p", "720p", "480p", "VIU", "WEB-DL", "WEBDL", "WEBRip", "H264", "H265",
    "H.264", "H.265", "x264", "x265", "h264", "h265", "HEVC", "AVC", "AAC",
    "AC3", "DTS",
)  # fmt: skip

# Stop words tried one at a time when no terminator matched
EPISODE_TITLE_STOP_WORDS: Final[tuple[str, ...]] = (
    *LANGUAGE_WORDS,
    "DL", "TV", "Dubbed", "Subbed", "BluRay", "BDRip", "DVDRip", "WEB-DL",
    "HDTV", "1080p", "720p", "480p", "x264", "x265", "h264", "h265", "HEVC",
    "AVC", "SVCD", "VCD", "READ", "NFO",
)  # fmt: skip

# A bracket whose content contains any of these is metadata, not title
METADATA_BRACKET_KEYWORDS: Final[tuple[str, ...]] = (
    "Remux", "TrueHD", "DTS-HD", "DTS HD", "EAC3", "WEB-DL", "WEBRip", "WEBDL",
    "BluRay", "Bluray", "x264", "x265", "h264", "h265", "HEVC", "AVC", "AAC",
    "AC3", "DTS", "MultiSub", "Multi-Subs", "HDR10", "1080p", "720p", "2160p",
    "480p", "GB", "Surround Sound", "imdbid", "imdb", "tmdb",
)  # fmt: skip

# Bracket-prefixed anime names: brackets that are never the title
ANIME_TITLE_REJECT_EXACT: Final[tuple[str, ...]] = (
    "AVC", "GB", "1080P", "720p", "1080p",
)  # fmt: skip

ANIME_TITLE_REJECT_CONTAINS: Final[tuple[str, ...]] = (
    "WEB-DL", "WEBRip", "WEBDL", "MultiSub", "Multi-Subs", "Surround Sound",
    "x264", "x265", "h264", "h265", "HEVC", "AVC",
)  # fmt: skip

# Words stripped from the title in addition to SOURCES
TITLE_NOISE_WORDS: Final[tuple[str, ...]] = (
    # Sources not in SOURCES spelling
    "INTERNAL", "Hybrid",
    # Formats
    "SVCD", "VCD", "XviD", "DivX", "x264", "x265", "h265", "h264", "HEVC",
    "AVC", "H.264", "H.265", "H264", "H265", "MPEG2", "MPEG4",
    # Audio
    "AC3", "DTS", "AAC", "MP3", "TrueHD", "EAC3", "Atmos", "Surround Sound",
    "DDP", "DDP2.0", "DDP5.1", "DDP2", "DDP5", "Dolby Digital Plus", "AAC 2.0",
    "AAC2.0", "AAC 5.1", "AAC5.1", "AC3 2.0", "AC3 5.1", "DTS 5.1", "DTS 2.0",
    # Languages
    "German", "English", "French", "Spanish", "Italian", "Eng", "NORDiC",
    "SWEDiSH", "NORWEGiAN", "Swedish", "Norwegian", "Danish", "Finnish",
    "Japanese", "Chinese", "Korean", "Arabic", "Turkish", "Multi", "MULTI",
    "Dubbed", "Subbed", "Hard.Sub", "HardSub",
    # Flags
    "TV", "DL", "READNFO", "NFO", "HDR10", "DV", "HDR10Plus", "3D", "10bit",
    "IMAX", "HYBRID", "REMASTERED", "Proper", "Uncut", "Extended", "Limited",
    "Special", "Collector", "Ultimate", "Edition", "U-Edition", "Director",
    "Cut", "ANiME", "MultiSub", "Multi-Subs",
)  # fmt: skip

# Video containers, also removed from the end of release names
MEDIA_EXTENSIONS: Final[tuple[str, ...]] = (
    "mkv", "mp4", "avi", "mov", "wmv", "flv", "webm", "m4v", "ts", "m2ts",
    "mts", "mpg", "mpeg", "vob", "iso", "divx", "ogm", "ogv", "rmvb", "3gp",
    "asf", "f4v",
)  # fmt: skip

# Side files stored next to the video in a library
SUBTITLE_EXTENSIONS: Final[tuple[str, ...]] = (
    "srt", "ass", "ssa", "sub", "idx", "vtt", "sup", "smi",
)  # fmt: skip

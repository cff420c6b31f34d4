# i18n.py
import locale
import logging

MESSAGES = {
    "en": {
        "reading_playlist": "Reading playlist '{path}'...",
        "playlist_valid": "Playlist '{path}' is valid.",
        "playlist_invalid": "Playlist '{path}' has {count} violation(s).",
        "parse_summary": "{tags} tag(s) parsed, {diagnostics} line(s) not understood.",
        "strict_failure": "Strict mode: {count} line(s) could not be parsed.",
        "playlist_written": "Playlist written to '{path}'.",
        "diagnostics_title": "Parse diagnostics",
        "tags_title": "Tags of '{path}'",
        "column_index": "#",
        "column_tag": "Tag",
        "column_fields": "Fields",
        "config_error": "Configuration error: {error}",
        "help_file": "Path of the M3U8 playlist.",
        "help_output": "Write the result to this file instead of standard output.",
        "help_lang": "Set the language for output messages (e.g., 'en' or 'fr').",
        "help_config": "YAML configuration file.",
        "help_strict": "Fail when some lines could not be parsed.",
        "violation_unknown": "Unknown violation.",
        "violation_missing_stream_marker": "The #EXTM3U tag is missing.",
        "violation_invalid_version": "Version {version} is not supported (1 to 7).",
        "violation_invalid_duration": "Segment duration {duration} must be positive.",
        "violation_invalid_target_duration": "Target duration must not be {duration}.",
        "violation_invalid_key_method": "Encryption method '{method}' is not NONE, AES-128 or SAMPLE-AES.",
        "violation_invalid_map_uri": "#EXT-X-MAP has an empty URI.",
        "violation_invalid_program_date_time": "#EXT-X-PROGRAM-DATE-TIME is empty.",
        "violation_invalid_bitrate": "Bitrate {bitrate} must not be negative.",
        "violation_invalid_start_offset": "#EXT-X-START has an empty TIME-OFFSET.",
        "violation_invalid_skip_tag": "SKIPPED-SEGMENTS must be positive, got {skipped_segments}.",
        "violation_invalid_preload_hint_uri": "#EXT-X-PRELOAD-HINT has an empty URI.",
        "violation_invalid_rendition_report_uri": "#EXT-X-RENDITION-REPORT has an empty URI."
    },
    "fr": {
        "reading_playlist": "Lecture de la playlist '{path}'...",
        "playlist_valid": "La playlist '{path}' est valide.",
        "playlist_invalid": "La playlist '{path}' contient {count} violation(s).",
        "parse_summary": "{tags} tag(s) analysé(s), {diagnostics} ligne(s) non comprise(s).",
        "strict_failure": "Mode strict : {count} ligne(s) n'ont pas pu être analysées.",
        "playlist_written": "Playlist écrite dans '{path}'.",
        "diagnostics_title": "Diagnostics d'analyse",
        "tags_title": "Tags de '{path}'",
        "column_index": "#",
        "column_tag": "Tag",
        "column_fields": "Champs",
        "config_error": "Erreur de configuration : {error}",
        "help_file": "Chemin de la playlist M3U8.",
        "help_output": "Écrire le résultat dans ce fichier au lieu de la sortie standard.",
        "help_lang": "Définit la langue des messages de sortie (ex: 'en' ou 'fr').",
        "help_config": "Fichier de configuration YAML.",
        "help_strict": "Échouer si certaines lignes n'ont pas pu être analysées.",
        "violation_unknown": "Violation inconnue.",
        "violation_missing_stream_marker": "Le tag #EXTM3U est absent.",
        "violation_invalid_version": "La version {version} n'est pas supportée (1 à 7).",
        "violation_invalid_duration": "La durée de segment {duration} doit être positive.",
        "violation_invalid_target_duration": "La durée cible ne doit pas valoir {duration}.",
        "violation_invalid_key_method": "La méthode de chiffrement '{method}' n'est ni NONE, ni AES-128, ni SAMPLE-AES.",
        "violation_invalid_map_uri": "#EXT-X-MAP a une URI vide.",
        "violation_invalid_program_date_time": "#EXT-X-PROGRAM-DATE-TIME est vide.",
        "violation_invalid_bitrate": "Le débit {bitrate} ne doit pas être négatif.",
        "violation_invalid_start_offset": "#EXT-X-START a un TIME-OFFSET vide.",
        "violation_invalid_skip_tag": "SKIPPED-SEGMENTS doit être positif, reçu {skipped_segments}.",
        "violation_invalid_preload_hint_uri": "#EXT-X-PRELOAD-HINT a une URI vide.",
        "violation_invalid_rendition_report_uri": "#EXT-X-RENDITION-REPORT a une URI vide."
    }
}

logger = logging.getLogger(__name__)

_current_lang = "en"


def _language_code(tag) -> str:
    # "fr_FR.UTF-8", "fr-CA" and "FR" all mean "fr".
    return str(tag or "").replace("-", "_").split("_")[0].split(".")[0].lower()


def get_default_lang():
    """Language of the system locale when a catalogue exists for it, else English."""
    try:
        code = _language_code(locale.getlocale()[0])
    except ValueError:
        return "en"
    return code if code in MESSAGES else "en"


def set_lang(lang: str):
    global _current_lang
    code = _language_code(lang)
    if code not in MESSAGES:
        logger.debug(f"No messages for language '{lang}', using English.")
        code = "en"
    _current_lang = code


def get_message(key, **kwargs):
    template = MESSAGES[_current_lang].get(key) or MESSAGES["en"].get(key)
    if template is None:
        logger.warning(f"No message for key '{key}'.")
        return key

    try:
        return template.format(**kwargs)
    except (KeyError, IndexError) as e:
        logger.warning(f"Message '{key}' needs placeholder {e}.")
        return template


# Start in the system language; the CLI may switch it.
set_lang(get_default_lang())

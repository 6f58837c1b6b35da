"""User-facing message catalog (en/pt)."""

from __future__ import annotations

from core.domain.language import Language

MESSAGES: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "usage_title": "GitHub User Activity",
        "usage": "Usage: github-activity <username> [--limit 30] [--json]",
        "error_prefix": "Error: ",
        "header": "GitHub activity for @{account}",
        "rate_remaining": "rate limit remaining: {remaining}",
        "no_events": "No recent events found.",
        "unknown_repo": "(unknown repository)",
        "unknown_time": "(unknown)",
        "not_found": "Account not found. Check the username.",
        "rate_limited": "Rate limit reached. Try again after {when}.",
        "http_error": "http_{status}: API request failed. {body}",
        "unexpected": "Unexpected failure: {cause}",
        "invalid_limit": "Invalid value for --limit: {value}",
        "unknown_flag": "Unknown flag: {flag}",
        "extra_argument": "Unexpected extra argument: {value}",
    },
    Language.PORTUGUESE: {
        "usage_title": "GitHub User Activity",
        "usage": "Uso: github-activity <username> [--limit 30] [--json]",
        "error_prefix": "Erro: ",
        "header": "Atividade no GitHub de @{account}",
        "rate_remaining": "limite restante: {remaining}",
        "no_events": "Nenhum evento recente encontrado.",
        "unknown_repo": "(repo desconhecido)",
        "unknown_time": "(desconhecido)",
        "not_found": "Usuário não encontrado. Verifique o username.",
        "rate_limited": "Limite de requisições atingido. Tente novamente após {when}.",
        "http_error": "http_{status}: Falha ao consultar API. {body}",
        "unexpected": "Falha inesperada: {cause}",
        "invalid_limit": "Valor inválido para --limit: {value}",
        "unknown_flag": "Flag desconhecida: {flag}",
        "extra_argument": "Argumentos extras não reconhecidos: {value}",
    },
}


def message(language: Language, key: str, **params: object) -> str:
    """Return the localized template `key` formatted with `params`."""

    catalog = MESSAGES.get(language) or MESSAGES[Language.default()]
    return catalog[key].format(**params)

"""
MUST HAVE REQUIREMENTS:
- Keep every user-facing message as a replaceable template keyed by name.
- Ship an English set and the original Portuguese set; pick one via SUBMISSION_CHECKS_LANG.
- Fall back to English for unknown languages.
- Preserve the information fields (counts, file names, tags, positions) in every language.
"""
# ----------------------------------
# Message templates per language
# ----------------------------------
import os

LANG_VAR = "SUBMISSION_CHECKS_LANG"
DEFAULT_LANG = "en"

templates = {
    "en": {
        "count_fail": "expected {expected} .html file, found {count}. Files found: {files}",
        "count_none": "none",
        "read_fail": "could not read file {file}: {error}",
        "read_ok": "file {file} read",
        "parse_fail": "html parse failed: {error}",
        "parse_ok": "html parsed without errors",
        "structure_fail": "missing basic html structure: {missing}",
        "structure_ok": "html, head and body present",
        "doctype_fail": "missing <!doctype html>",
        "doctype_ok": "doctype present",
        "body_missing": "missing body",
        "children_fail": (
            "invalid tag at position {index}: <{tag}>. "
            "Only <h1> and <p> are allowed inside body."
        ),
        "children_ok": "body children are h1 and p",
        "min_tags_fail": "at least one <{tag}> tag is required in body",
        "min_tags_ok": "h1 and p present",
        "extra_fail": "tag <{tag}> not allowed. Only <h1> and <p> are allowed directly in body.",
        "extra_ok": "no disallowed tags in body",
        "closing_fail": "body ends with an unterminated tag",
        "closing_ok": "tags closed",
        "content_fail": "<{tag}> tag at position {index} must not be empty",
        "content_ok": "h1 and p have content",
    },
    "pt": {
        "count_fail": (
            "Esperado {expected} arquivo .html, mas encontrados {count}. "
            "Arquivos encontrados: {files}"
        ),
        "count_none": "nenhum",
        "read_fail": "Erro ao ler o arquivo {file}: {error}",
        "read_ok": "arquivo {file} lido",
        "parse_fail": "Erro ao parsear o HTML: {error}",
        "parse_ok": "HTML sem erros de parsing",
        "structure_fail": "Estrutura básica do HTML ausente: {missing}",
        "structure_ok": "html, head e body presentes",
        "doctype_fail": "DOCTYPE html ausente",
        "doctype_ok": "DOCTYPE presente",
        "body_missing": "body ausente",
        "children_fail": (
            "Tag inválida na posição {index}: <{tag}>. "
            "Apenas <h1> e <p> são permitidos dentro do body."
        ),
        "children_ok": "filhos do body são h1 e p",
        "min_tags_fail": "Deve haver pelo menos uma tag <{tag}> no body",
        "min_tags_ok": "h1 e p presentes",
        "extra_fail": (
            "Tag <{tag}> não permitida. "
            "Apenas <h1> e <p> são permitidos diretamente no body."
        ),
        "extra_ok": "nenhuma tag extra no body",
        "closing_fail": "body termina com uma tag não fechada",
        "closing_ok": "tags fechadas",
        "content_fail": "Tag <{tag}> na posição {index} não pode estar vazia",
        "content_ok": "h1 e p com conteúdo",
    },
}


def text(key, **fields):
    lang = os.environ.get(LANG_VAR, DEFAULT_LANG)
    table = templates.get(lang, templates[DEFAULT_LANG])
    return table[key].format(**fields)

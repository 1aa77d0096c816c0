"""
Enumerated wizard options shared by the endpoint and the client.

Each table maps an option code to (short UI label, prompt phrase).
The phrase is what the prompt builder sends to the model; the label is
what the wizard and the saved-reels list show.
"""

from types import MappingProxyType
from typing import Mapping, Tuple


PAIN_POINTS: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "nao_aparece": (
        "Não aparece para ninguém",
        "não aparece para ninguém no Instagram",
    ),
    "nao_vende": (
        "Não vende o suficiente",
        "não consegue converter visualizações em vendas",
    ),
    "concorrente": (
        "Concorrente aparece mais",
        "vê os concorrentes dominando o feed enquanto fica invisível",
    ),
    "trafego_pago": (
        "Tráfego pago não funciona",
        "gastou dinheiro com tráfego pago mas não teve retorno",
    ),
})

OBJECTIVES: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "alcance_frio": (
        "Alcance frio (desconhecidos)",
        "alcançar pessoas que nunca te viram antes",
    ),
    "salvamentos": (
        "Salvamentos",
        "gerar salvamentos e construir biblioteca de valor",
    ),
    "compartilhamentos": (
        "Compartilhamentos",
        "viralizar através de compartilhamentos",
    ),
    "autoridade": (
        "Autoridade no nicho",
        "estabelecer autoridade no nicho",
    ),
})

TONES: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "direto": (
        "Direto ao ponto",
        "direto ao ponto, sem enrolação",
    ),
    "polemico": (
        "Polêmico",
        "polêmico, que provoca discussão",
    ),
    "educativo": (
        "Educativo prático",
        "educativo prático, que ensina algo útil",
    ),
})


def _phrases(table: Mapping[str, Tuple[str, str]]) -> Mapping[str, str]:
    return MappingProxyType({code: phrase for code, (_, phrase) in table.items()})


def _labels(table: Mapping[str, Tuple[str, str]]) -> Mapping[str, str]:
    return MappingProxyType({code: label for code, (label, _) in table.items()})


PAIN_POINT_PHRASES = _phrases(PAIN_POINTS)
OBJECTIVE_PHRASES = _phrases(OBJECTIVES)
TONE_PHRASES = _phrases(TONES)

PAIN_POINT_LABELS = _labels(PAIN_POINTS)
OBJECTIVE_LABELS = _labels(OBJECTIVES)
TONE_LABELS = _labels(TONES)


def label_for(labels: Mapping[str, str], code: str) -> str:
    """Display label for a code, or the code itself when unknown."""
    return labels.get(code, code)

# -*- coding: utf-8 -*-
"""
System prompts for the remote-model engines.

The model gets a precomputed date table (including weekday names, which the
local engine does not resolve), the Colombian amount rules and the same
category vocabulary as the local engine.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from uflow.parser.extract_category import allowed_categories

_DAY_NAMES = ("domingo", "lunes", "martes", "miércoles", "jueves", "viernes", "sábado")


def get_date_info(now: datetime) -> dict:
    """
    Reference dates for the prompt.

    Each weekday name maps to its most recent past occurrence; today's
    weekday maps to today.
    """
    day_of_week = (now.weekday() + 1) % 7  # Sunday = 0
    recent_days: dict[str, str] = {}
    for i, name in enumerate(_DAY_NAMES):
        days_ago = (day_of_week - i + 7) % 7 or 7
        recent_days[name] = (now - timedelta(days=days_ago)).strftime("%Y-%m-%d")
    recent_days[_DAY_NAMES[day_of_week]] = now.strftime("%Y-%m-%d")

    recent_days["hoy"] = now.strftime("%Y-%m-%d")
    recent_days["ayer"] = (now - timedelta(days=1)).strftime("%Y-%m-%d")
    recent_days["anteayer"] = (now - timedelta(days=2)).strftime("%Y-%m-%d")

    return {
        "today": now.strftime("%Y-%m-%d"),
        "day_name": _DAY_NAMES[day_of_week],
        "recent_days": recent_days,
    }


def _date_table(date_info: dict) -> str:
    days = date_info["recent_days"]
    lines = [
        f"- \"hoy\" → {days['hoy']}",
        f"- \"ayer\" → {days['ayer']}",
        f"- \"anteayer\" → {days['anteayer']}",
    ]
    lines += [f"- \"el {name}\" → {days[name]}" for name in _DAY_NAMES]
    return "\n".join(lines)


_AMOUNT_RULES = """## MONTOS EN PESOS COLOMBIANOS
- "mil" o "k" = multiplicar por 1.000 ("300mil" = 300000, "50k" = 50000)
- "millón", "millones", "M" o "palos" = multiplicar por 1.000.000 ("2 palos" = 2000000)"""

_TRANSACTION_FORMAT = """{
  "text": "Confirmación breve de lo registrado",
  "lang": "es",
  "intent": "create",
  "structured": {
    "type": "transaction",
    "data": {
      "type": "expense",
      "amount": 20000,
      "currency": "COP",
      "category": "Transport",
      "note": "descripción corta",
      "date": "YYYY-MM-DDT12:00:00.000Z"
    }
  }
}"""

_GOAL_FORMAT = """{
  "text": "Confirmación de la meta",
  "lang": "es",
  "intent": "create",
  "structured": {
    "type": "goal",
    "data": {"name": "Fondo de emergencia", "targetAmount": 2000000, "currency": "COP"}
  }
}"""

_QUERY_FORMAT = """{
  "text": "Tu respuesta conversacional",
  "lang": "es",
  "intent": "query"
}"""


def build_system_prompt(
    date_info: dict,
    previous_summary: Optional[str] = None,
    force_create: bool = False,
) -> str:
    """
    Build the system prompt.

    Args:
        date_info: output of ``get_date_info``
        previous_summary: summary of earlier conversations, passed verbatim
        force_create: quick-create mode, the reply must always be a create

    Returns:
        The prompt string
    """
    categories = ", ".join(allowed_categories())

    if force_create:
        return f"""Eres UFlow AI en MODO CREACIÓN RÁPIDA. Extrae del mensaje los datos de una transacción o meta. Responde SIEMPRE con intent "create".

## FECHA DE REFERENCIA
Hoy es {date_info['today']} ({date_info['day_name']}).
{_date_table(date_info)}

{_AMOUNT_RULES}

## CATEGORÍAS
{categories}

## TIPO
- "gasté", "pagué", "compré", "me costó" → expense
- "me pagaron", "recibí", "cobré", "vendí", "sueldo" → income
- Si no es claro → expense

## RESPUESTA (SOLO JSON)
{_TRANSACTION_FORMAT}
"""

    prompt = f"""Eres UFlow AI, un asistente de finanzas personales bilingüe (español/inglés), amable y profesional.

## TU ROL
1. Conversar sobre finanzas personales y dar consejos (ahorro, presupuesto, deudas).
2. Registrar gastos o ingresos SOLO cuando el usuario lo pida explícitamente.
3. Ayudar a crear metas de ahorro.

## FECHA DE REFERENCIA
Hoy es {date_info['today']} ({date_info['day_name']}).
{_date_table(date_info)}
"""
    if previous_summary:
        prompt += f"""
## CONTEXTO DE CONVERSACIONES ANTERIORES
{previous_summary}
"""
    prompt += f"""
{_AMOUNT_RULES}

## CATEGORÍAS
{categories}

## RESPUESTA (SIEMPRE JSON VÁLIDO, en el idioma del usuario)
Conversación o consejos:
{_QUERY_FORMAT}

Registrar transacción:
{_TRANSACTION_FORMAT}

Crear meta:
{_GOAL_FORMAT}
"""
    return prompt


SUMMARY_PROMPT = (
    "Resume en máximo 3 oraciones los puntos importantes de esta conversación financiera: "
    "objetivos del usuario, preferencias e información útil para futuras conversaciones. "
    "Responde solo con el resumen, sin JSON."
)

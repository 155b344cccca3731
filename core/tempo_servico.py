"""
Funções de tempo de serviço usadas no cálculo de rescisão.

Todas são puras e determinísticas: recebem datas ou contagens e devolvem
números, sem consultar a data atual.
"""

from datetime import date
from typing import Dict, Optional

from dateutil.relativedelta import relativedelta


AVISO_MINIMO_DIAS = 30
AVISO_MAXIMO_DIAS = 90
AVISO_DIAS_POR_ANO = 3


def calcular_dias_vinculo(data_inicio: date, data_fim: date) -> int:
    """
    Conta os dias do vínculo, incluindo o primeiro e o último.

    Exemplo:
        >>> calcular_dias_vinculo(date(2024, 1, 1), date(2024, 1, 31))
        31
    """
    return (data_fim - data_inicio).days + 1


def calcular_meses_vinculo(data_inicio: date, data_fim: date) -> int:
    """
    Calcula os meses inteiros do vínculo.

    Soma a diferença de anos e meses do calendário e conta mais um mês quando
    a diferença entre os dias do mês é de 15 ou mais (fração igual ou
    superior a meio mês). Nunca retorna valor negativo.

    Exemplo:
        >>> calcular_meses_vinculo(date(2024, 1, 1), date(2024, 3, 20))
        3
    """
    anos = data_fim.year - data_inicio.year
    meses = data_fim.month - data_inicio.month
    dias = data_fim.day - data_inicio.day

    total_meses = anos * 12 + meses
    if dias >= 15:
        total_meses += 1

    return max(0, total_meses)


def calcular_anos_completos(dias_vinculo: int) -> int:
    return dias_vinculo // 365


def calcular_dias_aviso(dias_vinculo: int) -> int:
    """
    Calcula os dias de aviso prévio proporcional (Lei 12.506/2011).

    30 dias mais 3 por ano completo a partir do segundo, limitado a 90 dias.

    Exemplo:
        >>> calcular_dias_aviso(400)
        30
        >>> calcular_dias_aviso(365 * 5)
        42
    """
    anos_completos = calcular_anos_completos(dias_vinculo)
    dias = AVISO_MINIMO_DIAS + max(0, anos_completos - 1) * AVISO_DIAS_POR_ANO
    return min(dias, AVISO_MAXIMO_DIAS)


def calcular_avos_ferias(data_inicio: date, data_fim: date) -> int:
    """Avos de férias proporcionais: meses do período aquisitivo em curso."""
    return calcular_meses_vinculo(data_inicio, data_fim) % 12


def calcular_avos_13(data_fim: date) -> int:
    """
    Avos de 13º salário: mês do desligamento.

    O 13º é apurado por ano civil, então a fração reinicia em janeiro e não
    depende da data de admissão.
    """
    return data_fim.month


def decompor_tempo_servico(data_inicio: date, data_fim: date) -> Dict[str, int]:
    """
    Decompõe o tempo de serviço em anos, meses e dias de calendário.

    Returns:
        Dicionário com as chaves "anos", "meses" e "dias".

    Exemplo:
        >>> decompor_tempo_servico(date(2020, 1, 1), date(2023, 3, 15))
        {'anos': 3, 'meses': 2, 'dias': 14}
    """
    delta = relativedelta(data_fim, data_inicio)
    return {
        "anos": delta.years,
        "meses": delta.months,
        "dias": delta.days,
    }


def resolver_editado(editado: Optional[float], calculado: float) -> float:
    """
    Escolhe entre o valor editado pelo usuário e o valor calculado.

    O valor editado prevalece quando informado e não negativo; ausente ou
    negativo, vale o calculado.

    Exemplo:
        >>> resolver_editado(None, 30)
        30
        >>> resolver_editado(45, 30)
        45
        >>> resolver_editado(-1, 30)
        30
    """
    if editado is not None and editado >= 0:
        return editado
    return calculado


def editado_valido(editado: Optional[float]) -> bool:
    return editado is not None and editado >= 0

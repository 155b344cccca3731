# tests/test_tempo_servico.py

from datetime import date

import pytest

from core.tempo_servico import (
    calcular_anos_completos,
    calcular_avos_13,
    calcular_avos_ferias,
    calcular_dias_aviso,
    calcular_dias_vinculo,
    calcular_meses_vinculo,
    decompor_tempo_servico,
    editado_valido,
    resolver_editado,
)


def test_dias_vinculo_conta_primeiro_e_ultimo_dia():
    assert calcular_dias_vinculo(date(2024, 1, 1), date(2024, 1, 1)) == 1
    assert calcular_dias_vinculo(date(2024, 1, 1), date(2024, 1, 31)) == 31
    # 2024 é bissexto
    assert calcular_dias_vinculo(date(2024, 1, 1), date(2025, 2, 3)) == 400


@pytest.mark.parametrize("inicio, fim, esperado", [
    (date(2024, 1, 1), date(2024, 3, 1), 2),
    (date(2024, 1, 1), date(2024, 3, 16), 3),   # diferença de 15 dias arredonda para cima
    (date(2024, 1, 1), date(2024, 3, 15), 2),   # 14 dias não arredonda
    (date(2024, 1, 20), date(2024, 3, 5), 2),   # diferença negativa de dias não desconta mês
    (date(2024, 1, 1), date(2025, 2, 3), 13),
])
def test_meses_vinculo_regra_de_meio_mes(inicio, fim, esperado):
    assert calcular_meses_vinculo(inicio, fim) == esperado


def test_meses_vinculo_nunca_negativo():
    assert calcular_meses_vinculo(date(2025, 5, 1), date(2024, 1, 1)) == 0


def test_anos_completos():
    assert calcular_anos_completos(364) == 0
    assert calcular_anos_completos(365) == 1
    assert calcular_anos_completos(400) == 1
    assert calcular_anos_completos(365 * 7 + 10) == 7


@pytest.mark.parametrize("dias_vinculo, esperado", [
    (10, 30),
    (400, 30),        # 1 ano completo: ainda sem acréscimo
    (365 * 2, 33),
    (365 * 5, 42),
    (365 * 21, 90),
    (365 * 40, 90),   # limitado a 90 dias
])
def test_dias_aviso_proporcional(dias_vinculo, esperado):
    assert calcular_dias_aviso(dias_vinculo) == esperado


def test_avos_ferias_sao_meses_do_periodo_em_curso():
    assert calcular_avos_ferias(date(2024, 1, 1), date(2025, 2, 3)) == 1
    assert calcular_avos_ferias(date(2024, 1, 1), date(2024, 12, 20)) == 0
    assert calcular_avos_ferias(date(2023, 6, 1), date(2024, 10, 1)) == 4


def test_avos_13_seguem_o_mes_do_desligamento():
    assert calcular_avos_13(date(2025, 2, 3)) == 2
    assert calcular_avos_13(date(2025, 12, 31)) == 12
    assert calcular_avos_13(date(2025, 1, 2)) == 1


def test_decompor_tempo_servico():
    assert decompor_tempo_servico(date(2020, 1, 1), date(2023, 3, 15)) == {
        "anos": 3,
        "meses": 2,
        "dias": 14,
    }


def test_resolver_editado_prevalece_quando_nao_negativo():
    assert resolver_editado(None, 30) == 30
    assert resolver_editado(45, 30) == 45
    assert resolver_editado(0, 30) == 0
    assert resolver_editado(-1, 30) == 30
    assert resolver_editado(1234.56, 999.0) == 1234.56


def test_editado_valido():
    assert editado_valido(0)
    assert editado_valido(10.5)
    assert not editado_valido(None)
    assert not editado_valido(-0.01)

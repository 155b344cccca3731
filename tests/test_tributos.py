# tests/test_tributos.py

import math

import pytest

from core.tabelas import TABELA_INSS, TABELA_IRRF, VALOR_DEPENDENTE_IRRF
from core.tributos import calcular_inss, calcular_irrf
from models.regras import FaixaInss, TabelaInss


# --- INSS ---

def test_inss_base_zero():
    assert calcular_inss(0.0) == 0.0


def test_inss_primeira_faixa():
    assert calcular_inss(1518.00) == pytest.approx(113.85)
    assert calcular_inss(1000.00) == pytest.approx(75.00)


def test_inss_progressivo_tributa_cada_faixa_pela_sua_aliquota():
    # 1518,00 × 7,5% + (2793,88 - 1518,00) × 9% + (3000,00 - 2793,88) × 12%
    esperado = 1518.00 * 0.075 + (2793.88 - 1518.00) * 0.09 + (3000.00 - 2793.88) * 0.12
    assert calcular_inss(3000.00) == pytest.approx(esperado)
    assert calcular_inss(3000.00) == pytest.approx(253.41, abs=0.01)


@pytest.mark.parametrize("base", [8157.41, 8157.42, 10000.00, 50000.00, 1_000_000.00])
def test_inss_acima_do_teto_igual_ao_teto(base):
    assert calcular_inss(base) == calcular_inss(TABELA_INSS.teto)


def test_inss_maximo():
    assert calcular_inss(TABELA_INSS.teto) == pytest.approx(951.63, abs=0.01)


def test_inss_tabela_personalizada():
    tabela = TabelaInss(
        teto=2000.0,
        faixas=(FaixaInss(ate=1000.0, aliquota=0.1), FaixaInss(ate=2000.0, aliquota=0.2)),
    )
    assert calcular_inss(1500.0, tabela) == pytest.approx(200.0)
    assert calcular_inss(5000.0, tabela) == pytest.approx(300.0)


# --- IRRF ---

def test_irrf_isento():
    assert calcular_irrf(2428.80, 0, 0) == 0.0
    assert calcular_irrf(2000.00, 0, 0) == 0.0


def test_irrf_base_negativa_ou_zero():
    assert calcular_irrf(1000.00, 3, 200.00) == 0.0
    assert calcular_irrf(0.0, 0, 0) == 0.0


def test_irrf_faixa_unica_com_parcela_a_deduzir():
    assert calcular_irrf(3000.00, 0, 0) == pytest.approx(3000.00 * 0.15 - 394.16)
    assert calcular_irrf(5000.00, 0, 0) == pytest.approx(466.27)


def test_irrf_deduz_inss_e_dependentes():
    base = 5000.00 - 500.00 - 2 * VALOR_DEPENDENTE_IRRF
    esperado = base * 0.225 - 675.49
    assert calcular_irrf(5000.00, 2, 500.00) == pytest.approx(esperado, abs=0.01)


def test_irrf_base_entre_centavos_nao_cai_fora_da_tabela():
    # 2826.655 fica entre duas faixas; o arredondamento ao centavo garante o enquadramento
    assert calcular_irrf(2826.655, 0, 0) > 0


@pytest.mark.parametrize("indice", range(1, len(TABELA_IRRF)))
def test_irrf_sem_descontinuidade_nas_mudancas_de_faixa(indice):
    anterior = TABELA_IRRF[indice - 1]
    faixa = TABELA_IRRF[indice]
    imposto_fim_anterior = calcular_irrf(anterior.ate, 0, 0)
    imposto_inicio_faixa = calcular_irrf(faixa.de, 0, 0)
    assert abs(imposto_inicio_faixa - imposto_fim_anterior) <= 0.01


def test_irrf_nao_decrescente_acima_da_isencao():
    bases = [2428.81 + i * 7.31 for i in range(1000)]
    impostos = [calcular_irrf(base, 0, 0) for base in bases]
    for menor, maior in zip(impostos, impostos[1:]):
        assert maior >= menor - 0.01


# --- Invariantes das tabelas ---

def test_tabela_inss_faixas_crescentes_e_teto_na_ultima():
    limites = [faixa.ate for faixa in TABELA_INSS.faixas]
    assert limites == sorted(limites)
    assert len(set(limites)) == len(limites)
    assert limites[-1] == TABELA_INSS.teto


def test_tabela_irrf_faixas_contiguas():
    assert TABELA_IRRF[0].de == 0.0
    assert math.isinf(TABELA_IRRF[-1].ate)
    for anterior, faixa in zip(TABELA_IRRF, TABELA_IRRF[1:]):
        assert faixa.ate > anterior.ate
        assert faixa.de == pytest.approx(anterior.ate + 0.01)

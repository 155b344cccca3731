"""
Módulo de cálculo de rescisão trabalhista determinístico.

Implementa as regras da CLT para apuração das verbas rescisórias, das
retenções de INSS e IRRF e da multa do FGTS a partir de DadosRescisao.
O cálculo é uma função pura: a mesma entrada sempre produz o mesmo
resultado, sem estado entre chamadas.
"""

from typing import List, Optional, Tuple

from config.logging_config import log
from config.settings import Config
from core.excecoes import DataTerminoContratoAusenteError
from core.tabelas import DIAS_MES, SALARIO_MINIMO, resolver_motivo
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
from core.tributos import calcular_inss, calcular_irrf
from models.regras import Motivo
from models.schemas import (
    DadosRescisao,
    DetalheCalculo,
    ResultadoRescisao,
    Verba,
    VerbaNaoTributavel,
)


# Hora noturna reduzida: 52min30s valem uma hora (art. 73, §1º CLT)
FATOR_HORA_NOTURNA = 60 / 52.5
ADICIONAL_HE_50 = 1.5
ADICIONAL_HE_100 = 2.0
FATOR_INDENIZACAO_479 = 0.5

RUBRICA_DESCONTO_AVISO = "DESCONTO_AVISO_NAO_CUMPRIDO"
RUBRICA_MULTA_FGTS = "MULTA_FGTS"

CODIGO_CULPA_RECIPROCA = "28"
CODIGO_ACORDO_484A = "44"

CAMPOS_EDITAVEIS = (
    "dias_aviso_editado",
    "avos_ferias_editado",
    "avos_13_editado",
    "ferias_vencidas_editado",
    "ferias_proporcionais_editado",
    "decimo_terceiro_editado",
)


def calcular_remuneracao_referencia(dados: DadosRescisao) -> float:
    """Salário base + média das variáveis: base das verbas rescisórias."""
    return dados.salario_base + dados.media_variaveis


def calcular_base_hora_extra(dados: DadosRescisao) -> float:
    """Base do valor-hora: salário base + adicionais fixos do mês."""
    return (
        dados.salario_base
        + dados.ats
        + dados.comissoes
        + dados.insalubridade
        + dados.gratificacoes
        + dados.periculosidade
    )


def calcular_valor_verba_nao_tributavel(
    item: VerbaNaoTributavel,
    dados: DadosRescisao,
    remuneracao_referencia: float,
) -> float:
    """
    Calcula o valor de um item não tributável.

    Itens fixos valem o próprio valor informado; itens percentuais aplicam
    valor/100 sobre a base escolhida no item.
    """
    if item.natureza == "fixo":
        return item.valor

    return obter_base_nao_tributavel(item, dados, remuneracao_referencia) * item.valor / 100


def obter_base_nao_tributavel(
    item: VerbaNaoTributavel,
    dados: DadosRescisao,
    remuneracao_referencia: float,
) -> float:
    if item.base_tipo == "salario_base":
        return dados.salario_base
    if item.base_tipo == "salario_minimo":
        return SALARIO_MINIMO
    if item.base_tipo == "custom":
        return item.base_custom or 0.0
    if item.base_tipo == "assistencial":
        if dados.salario_assistencial is not None:
            return dados.salario_assistencial
        return dados.salario_base
    return remuneracao_referencia


def limitar_desconto(
    valor_desconto: float,
    liquido_sem_desconto: float,
    limite: float = Config.LIMITE_DESCONTO_LIQUIDO,
) -> float:
    """
    Limita um desconto a uma fração do líquido apurado sem ele.

    Exemplo:
        >>> round(limitar_desconto(2000.0, 2200.0), 2)
        1540.0
        >>> limitar_desconto(500.0, 2200.0)
        500.0
    """
    teto = max(0.0, liquido_sem_desconto * limite)
    return min(valor_desconto, teto)


def _verba_salarial(
    rubrica: str,
    descricao: str,
    valor: float,
    detalhes: Optional[DetalheCalculo] = None,
    **extras,
) -> Verba:
    """Provento com incidência de INSS, IRRF e FGTS."""
    return Verba(
        rubrica=rubrica,
        descricao=descricao,
        valor=valor,
        tipo="provento",
        incide_inss=True,
        incide_irrf=True,
        incide_fgts=True,
        detalhes=detalhes,
        **extras,
    )


def _consolidar_totais(verbas: List[Verba], inss: float, irrf: float) -> Tuple[float, float, float]:
    """Retorna (total de proventos, total de descontos, líquido)."""
    total_proventos = sum(v.valor for v in verbas if v.tipo == "provento")
    total_descontos = sum(v.valor for v in verbas if v.tipo == "desconto") + inss + irrf
    return total_proventos, total_descontos, total_proventos - total_descontos


def _somar_base(verbas: List[Verba], incidencia: str) -> float:
    return sum(v.valor for v in verbas if v.tipo == "provento" and getattr(v, incidencia))


def _avisar_editados_negativos(dados: DadosRescisao) -> None:
    for campo in CAMPOS_EDITAVEIS:
        valor = getattr(dados, campo)
        if valor is not None and valor < 0:
            log.warning(f"Valor editado negativo ignorado em '{campo}' ({valor}); usando o valor calculado.")


def _gerar_observacoes(
    dados: DadosRescisao,
    motivo: Motivo,
    dias_vinculo: int,
    remuneracao_referencia: float,
    multa_fgts: float,
    dias_aviso_editado: bool,
) -> List[str]:
    observacoes = []

    if motivo.codigo == CODIGO_ACORDO_484A:
        observacoes.append(
            "Rescisão por acordo (Art. 484-A): o empregado pode movimentar até 80% do saldo do FGTS, "
            "a multa do FGTS é reduzida a 20%, o aviso prévio indenizado é pago pela metade "
            "e não há direito ao seguro-desemprego."
        )

    if motivo.codigo == CODIGO_CULPA_RECIPROCA:
        observacoes.append(
            "Culpa recíproca: verbas proporcionais reduzidas em 50% e multa do FGTS de 20% (Súmula 14 do TST)."
        )

    if dias_vinculo > 365:
        observacoes.append(
            "Vínculo superior a um ano: verifique se a convenção coletiva exige homologação "
            "ou assistência sindical na rescisão."
        )

    if multa_fgts > 0:
        observacoes.append(
            f"A multa do FGTS (R$ {multa_fgts:.2f}) é depositada diretamente na conta vinculada do trabalhador."
        )

    if dias_aviso_editado and not (dados.justificativa_aviso_editado or "").strip():
        observacoes.append("Dias de aviso prévio editados sem justificativa informada.")

    if dados.tipo_contrato == "EXPERIENCIA" and dias_vinculo > Config.LIMITE_EXPERIENCIA_DIAS:
        observacoes.append(
            f"Contrato de experiência com {dias_vinculo} dias excede o limite de "
            f"{Config.LIMITE_EXPERIENCIA_DIAS} dias (Art. 445 CLT): verifique se o contrato "
            "passou a vigorar por prazo indeterminado."
        )

    if dados.media_variaveis > 0:
        observacoes.append(
            f"Remuneração de referência considerada (salário + médias): R$ {remuneracao_referencia:.2f}"
        )

    return observacoes


def aplicar_limite_desconto_aviso(resultado: ResultadoRescisao) -> ResultadoRescisao:
    """
    Limita o desconto de aviso não cumprido a 70% do líquido sem esse desconto.

    O limite é calculado sobre o líquido anterior ao desconto, então uma
    única correção basta. Quando o desconto está dentro do limite, o próprio
    resultado é devolvido; caso contrário, um novo resultado é montado com o
    desconto reduzido e os totais recalculados.
    """
    indice = next(
        (i for i, v in enumerate(resultado.verbas) if v.rubrica == RUBRICA_DESCONTO_AVISO),
        None,
    )
    if indice is None:
        return resultado

    verba = resultado.verbas[indice]
    liquido_sem_desconto = resultado.liquido + verba.valor
    valor_limitado = limitar_desconto(verba.valor, liquido_sem_desconto)

    if valor_limitado >= verba.valor:
        return resultado

    log.info(
        f"Desconto de aviso limitado: R$ {verba.valor:.2f} -> R$ {valor_limitado:.2f} "
        f"(70% de R$ {liquido_sem_desconto:.2f})"
    )

    verba_limitada = verba.model_copy(update={
        "descricao": f"{verba.descricao} - limitado a 70% do líquido",
        "valor": valor_limitado,
        "valor_calculado": verba.valor,
        "limitado": True,
        "detalhes": DetalheCalculo(
            descricao="Desconto limitado a 70% do líquido (Art. 477, §5º CLT)",
            formula="mín(Desconto Calculado, Líquido sem Desconto × 70%)",
            valores={
                "Desconto Calculado": verba.valor,
                "Líquido sem Desconto": liquido_sem_desconto,
                "Limite": valor_limitado,
            },
        ),
    })

    verbas = list(resultado.verbas)
    verbas[indice] = verba_limitada
    total_proventos, total_descontos, liquido = _consolidar_totais(verbas, resultado.inss, resultado.irrf)

    return resultado.model_copy(update={
        "verbas": verbas,
        "total_proventos": total_proventos,
        "total_descontos": total_descontos,
        "liquido": liquido,
        "observacoes": resultado.observacoes + [
            f"Desconto de aviso não cumprido limitado a R$ {valor_limitado:.2f} "
            f"(70% do líquido sem o desconto, R$ {liquido_sem_desconto:.2f})."
        ],
    })


def calcular_rescisao(dados: DadosRescisao) -> ResultadoRescisao:
    """
    Calcula as verbas rescisórias, as retenções e o líquido de uma rescisão.

    Args:
        dados: Dados do vínculo, variáveis do mês e valores editados.

    Returns:
        ResultadoRescisao com as verbas na ordem do termo de rescisão,
        totais, retenções, avos, dias de aviso e observações.

    Raises:
        MotivoDesconhecidoError: Código de motivo inexistente.
        CategoriaDesconhecidaError: Motivo aponta para categoria inexistente.
        DataTerminoContratoAusenteError: Rescisão antecipada de contrato a
            termo (Art. 479) sem data de término do contrato.

    Exemplo:
        >>> from datetime import date
        >>> dados = DadosRescisao(
        ...     salario_base=3000.0,
        ...     data_admissao=date(2024, 1, 1),
        ...     data_desligamento=date(2025, 2, 3),
        ...     motivo_codigo="02",
        ...     dias_trabalhados=3,
        ...     saldo_fgts=3000.0,
        ... )
        >>> resultado = calcular_rescisao(dados)
        >>> resultado.dias_aviso, resultado.multa_fgts
        (30, 1200.0)
    """
    motivo, categoria = resolver_motivo(dados.motivo_codigo)
    log.debug(f"Motivo {motivo.codigo} ({motivo.descricao}) -> categoria {motivo.categoria}")

    if categoria.requer_data_termino and dados.data_termino_contrato is None:
        raise DataTerminoContratoAusenteError(motivo.codigo)

    _avisar_editados_negativos(dados)

    # Tempo de serviço
    dias_vinculo = calcular_dias_vinculo(dados.data_admissao, dados.data_desligamento)
    meses_vinculo = calcular_meses_vinculo(dados.data_admissao, dados.data_desligamento)
    anos_completos = calcular_anos_completos(dias_vinculo)

    # Bases de cálculo
    remuneracao = calcular_remuneracao_referencia(dados)
    base_hora_extra = calcular_base_hora_extra(dados)
    valor_hora = base_hora_extra / dados.horas_mensais if dados.horas_mensais > 0 else 0.0
    if dados.horas_mensais <= 0 and (dados.horas_extras_50 or dados.horas_extras_100 or dados.horas_noturnas):
        log.warning("Divisor de horas mensais zerado: horas extras e adicional noturno não serão calculados.")

    # Variáveis do mês
    quebra_caixa = dados.salario_base * dados.quebra_caixa_percentual
    horas_extras_50 = valor_hora * ADICIONAL_HE_50 * dados.horas_extras_50
    horas_extras_100 = valor_hora * ADICIONAL_HE_100 * dados.horas_extras_100
    total_horas_extras = horas_extras_50 + horas_extras_100

    horas_noturnas_equivalentes = dados.horas_noturnas * FATOR_HORA_NOTURNA
    adicional_noturno = valor_hora * dados.adicional_noturno_percentual * horas_noturnas_equivalentes

    # DSR separado: horas extras (com noturno) e comissões
    dsr_horas_extras = 0.0
    dsr_comissoes = 0.0
    if dados.dsr_dias_uteis > 0:
        dsr_horas_extras = (
            (total_horas_extras + adicional_noturno) / dados.dsr_dias_uteis
        ) * dados.dsr_dias_nao_uteis
        dsr_comissoes = (dados.comissoes / dados.dsr_dias_uteis) * dados.dsr_dias_nao_uteis
    dsr_total = dsr_horas_extras + dsr_comissoes

    total_variaveis = total_horas_extras + dados.comissoes + adicional_noturno

    verbas: List[Verba] = []

    # 1. Saldo de salário
    if categoria.saldo_salario and dados.dias_trabalhados > 0:
        verbas.append(_verba_salarial(
            "SALDO_SALARIO",
            f"Saldo de Salário ({dados.dias_trabalhados} dias)",
            (remuneracao / DIAS_MES) * dados.dias_trabalhados,
            DetalheCalculo(
                descricao="Saldo de salário dos dias trabalhados no mês",
                formula="(Salário + Médias) ÷ 30 × Dias Trabalhados",
                valores={"Remuneração": remuneracao, "Dias Trabalhados": dados.dias_trabalhados},
            ),
        ))

    # 2. Quebra de caixa
    if quebra_caixa > 0:
        percentual = f"{dados.quebra_caixa_percentual * 100:.0f}%"
        verbas.append(_verba_salarial(
            "QUEBRA_CAIXA",
            f"Quebra de Caixa ({percentual})",
            quebra_caixa,
            DetalheCalculo(
                descricao="Quebra de caixa calculada sobre o salário base",
                formula="Salário Base × Percentual",
                valores={"Salário Base": dados.salario_base, "Percentual": percentual},
            ),
        ))

    # 3. Horas extras
    for rubrica, adicional, horas, valor in (
        ("HORAS_EXTRAS_50", ADICIONAL_HE_50, dados.horas_extras_50, horas_extras_50),
        ("HORAS_EXTRAS_100", ADICIONAL_HE_100, dados.horas_extras_100, horas_extras_100),
    ):
        if valor > 0:
            percentual = f"{(adicional - 1) * 100:.0f}%"
            verbas.append(_verba_salarial(
                rubrica,
                f"Horas Extras {percentual} ({horas:g}h)",
                valor,
                DetalheCalculo(
                    descricao=f"Horas extras com adicional de {percentual}",
                    formula=f"(Base ÷ Horas Mensais) × {adicional:.1f} × Quantidade",
                    valores={
                        "Base HE": base_hora_extra,
                        "Divisor": dados.horas_mensais,
                        "Valor Hora": valor_hora,
                        "Quantidade": horas,
                    },
                ),
            ))

    # 4. Adicional noturno (hora reduzida)
    if adicional_noturno > 0:
        percentual = f"{dados.adicional_noturno_percentual * 100:.0f}%"
        verbas.append(_verba_salarial(
            "ADICIONAL_NOTURNO",
            f"Adicional Noturno {percentual} ({dados.horas_noturnas:g}h -> {horas_noturnas_equivalentes:.2f}h eq.)",
            adicional_noturno,
            DetalheCalculo(
                descricao="Adicional noturno com hora reduzida",
                formula="Valor Hora × Percentual × Horas Equivalentes (h × 60/52,5)",
                valores={
                    "Valor Hora": valor_hora,
                    "Percentual": percentual,
                    "Horas Trabalhadas": dados.horas_noturnas,
                    "Horas Equivalentes": horas_noturnas_equivalentes,
                },
            ),
        ))

    # 5. DSR sobre horas extras e sobre comissões
    dias_dsr = f"{dados.dsr_dias_uteis} úteis / {dados.dsr_dias_nao_uteis} não úteis"
    if dsr_horas_extras > 0:
        verbas.append(_verba_salarial(
            "DSR_HORAS_EXTRAS",
            f"DSR sobre Horas Extras ({dias_dsr})",
            dsr_horas_extras,
            DetalheCalculo(
                descricao="DSR calculado sobre horas extras e adicional noturno",
                formula="((Total HE + Noturno) ÷ Dias Úteis) × Dias Não Úteis",
                valores={
                    "Total HE": total_horas_extras,
                    "Adicional Noturno": adicional_noturno,
                    "Base DSR": total_horas_extras + adicional_noturno,
                    "Dias Úteis": dados.dsr_dias_uteis,
                    "Dias Não Úteis": dados.dsr_dias_nao_uteis,
                },
            ),
        ))

    if dsr_comissoes > 0:
        verbas.append(_verba_salarial(
            "DSR_COMISSOES",
            f"DSR sobre Comissões ({dias_dsr})",
            dsr_comissoes,
            DetalheCalculo(
                descricao="DSR calculado sobre comissões",
                formula="(Comissões ÷ Dias Úteis) × Dias Não Úteis",
                valores={
                    "Comissões": dados.comissoes,
                    "Dias Úteis": dados.dsr_dias_uteis,
                    "Dias Não Úteis": dados.dsr_dias_nao_uteis,
                },
            ),
        ))

    # 6. Adicionais fixos do mês
    for rubrica, descricao, valor in (
        ("ATS", "Adicional por Tempo de Serviço", dados.ats),
        ("INSALUBRIDADE", "Adicional de Insalubridade", dados.insalubridade),
        ("PERICULOSIDADE", "Adicional de Periculosidade", dados.periculosidade),
        ("GRATIFICACOES", "Gratificações", dados.gratificacoes),
    ):
        if valor > 0:
            verbas.append(_verba_salarial(rubrica, descricao, valor))

    # Avos calculados e utilizados
    avos_ferias_calculado = calcular_avos_ferias(dados.data_admissao, dados.data_desligamento)
    avos_13_calculado = calcular_avos_13(dados.data_desligamento)
    avos_ferias = resolver_editado(dados.avos_ferias_editado, avos_ferias_calculado)
    avos_13 = resolver_editado(dados.avos_13_editado, avos_13_calculado)

    # 7. Férias vencidas
    ferias_vencidas = 0.0
    if categoria.ferias_vencidas and (
        dados.periodos_ferias_vencidas > 0 or editado_valido(dados.ferias_vencidas_editado)
    ):
        ferias_vencidas_calculado = remuneracao * dados.periodos_ferias_vencidas
        ferias_vencidas = resolver_editado(dados.ferias_vencidas_editado, ferias_vencidas_calculado)
        periodos = dados.periodos_ferias_vencidas
        verbas.append(Verba(
            rubrica="FERIAS_VENCIDAS",
            descricao=f"Férias Vencidas ({periodos} período{'s' if periodos > 1 else ''})",
            valor=ferias_vencidas,
            tipo="provento",
            valor_calculado=ferias_vencidas_calculado,
            valor_editado=(
                editado_valido(dados.ferias_vencidas_editado)
                and dados.ferias_vencidas_editado != ferias_vencidas_calculado
            ),
        ))

    # 8. Férias proporcionais (fator de redução só no valor calculado)
    ferias_proporcionais = 0.0
    ferias_editado = editado_valido(dados.ferias_proporcionais_editado)
    avos_ferias_editado = editado_valido(dados.avos_ferias_editado)
    if categoria.ferias_proporcionais and (avos_ferias > 0 or ferias_editado):
        ferias_proporcionais_calculado = (remuneracao / 12) * avos_ferias_calculado * categoria.fator_reducao
        ferias_proporcionais_com_avos = (remuneracao / 12) * avos_ferias * categoria.fator_reducao
        ferias_proporcionais = resolver_editado(
            dados.ferias_proporcionais_editado, ferias_proporcionais_com_avos
        )
        verbas.append(Verba(
            rubrica="FERIAS_PROP",
            descricao=(
                f"Férias Proporcionais ({avos_ferias}/12)"
                f"{' - 50%' if categoria.fator_reducao < 1 else ''}"
                f"{' - avos editado' if avos_ferias_editado else ''}"
            ),
            valor=ferias_proporcionais,
            tipo="provento",
            valor_calculado=ferias_proporcionais_calculado,
            valor_editado=ferias_editado or avos_ferias_editado,
            detalhes=DetalheCalculo(
                descricao="Férias proporcionais do período aquisitivo em curso",
                formula="(Salário + Médias) ÷ 12 × Avos × Fator de Redução",
                valores={
                    "Remuneração": remuneracao,
                    "Avos Calculados": avos_ferias_calculado,
                    "Avos Utilizados": avos_ferias,
                    "Fator de Redução": categoria.fator_reducao,
                },
            ),
        ))

    # 9. 13º salário proporcional
    decimo_editado = editado_valido(dados.decimo_terceiro_editado)
    avos_13_editado = editado_valido(dados.avos_13_editado)
    if categoria.decimo_terceiro:
        decimo_terceiro_calculado = (remuneracao / 12) * avos_13_calculado * categoria.fator_reducao
        decimo_terceiro_com_avos = (remuneracao / 12) * avos_13 * categoria.fator_reducao
        decimo_terceiro = resolver_editado(dados.decimo_terceiro_editado, decimo_terceiro_com_avos)

        if decimo_terceiro > 0 or decimo_editado or avos_13_editado:
            verbas.append(_verba_salarial(
                "DECIMO_TERCEIRO",
                (
                    f"13º Salário Proporcional ({avos_13}/12)"
                    f"{' - 50%' if categoria.fator_reducao < 1 else ''}"
                    f"{' - avos editado' if avos_13_editado else ''}"
                ),
                decimo_terceiro,
                DetalheCalculo(
                    descricao="13º proporcional aos meses do ano do desligamento",
                    formula="(Salário + Médias) ÷ 12 × Avos × Fator de Redução",
                    valores={
                        "Remuneração": remuneracao,
                        "Avos Calculados": avos_13_calculado,
                        "Avos Utilizados": avos_13,
                        "Fator de Redução": categoria.fator_reducao,
                    },
                ),
                valor_calculado=decimo_terceiro_calculado,
                valor_editado=decimo_editado or avos_13_editado,
            ))

    # 10. Aviso prévio indenizado e reflexos
    dias_aviso_calculado = calcular_dias_aviso(dias_vinculo)
    dias_aviso = resolver_editado(dados.dias_aviso_editado, dias_aviso_calculado)
    dias_aviso_editado = (
        editado_valido(dados.dias_aviso_editado) and dados.dias_aviso_editado != dias_aviso_calculado
    )

    ferias_aviso = 0.0
    if categoria.aviso and dados.tipo_aviso == "INDENIZADO" and dias_aviso > 0:
        valores_aviso = {
            "Base": remuneracao,
            "Dias Calculados": dias_aviso_calculado,
            "Dias Utilizados": dias_aviso,
            "Anos de Serviço": anos_completos,
            "Fator": categoria.fator_aviso,
        }
        if dias_aviso_editado and dados.justificativa_aviso_editado:
            valores_aviso["Justificativa"] = dados.justificativa_aviso_editado

        verbas.append(Verba(
            rubrica="AVISO_PREVIO_INDENIZADO",
            descricao=(
                f"Aviso Prévio Indenizado ({dias_aviso} dias"
                f"{' - 50%' if categoria.fator_aviso < 1 else ''}"
                f"{' - editado' if dias_aviso_editado else ''})"
            ),
            valor=(remuneracao / DIAS_MES) * dias_aviso * categoria.fator_aviso,
            tipo="provento",
            incide_fgts=True,
            detalhes=DetalheCalculo(
                descricao="Aviso prévio indenizado",
                formula="(Salário + Médias) ÷ 30 × Dias de Aviso × Fator",
                valores=valores_aviso,
            ),
        ))

        # Projeção do aviso: +1/12 de 13º e de férias com ao menos um ano completo
        if categoria.reflexos_aviso and anos_completos >= 1:
            avos_projecao = 1
            verbas.append(_verba_salarial(
                "DECIMO_TERCEIRO_PROJECAO_AVISO",
                f"13º Indenizado por Projeção do Aviso ({avos_projecao}/12)",
                (remuneracao / 12) * avos_projecao,
            ))

            ferias_aviso = (remuneracao / 12) * avos_projecao
            verbas.append(Verba(
                rubrica="FERIAS_PROJECAO_AVISO",
                descricao=f"Férias Indenizadas por Projeção do Aviso ({avos_projecao}/12)",
                valor=ferias_aviso,
                tipo="provento",
            ))

    # 11. 1/3 constitucional sobre todas as férias
    base_terco = ferias_vencidas + ferias_proporcionais + ferias_aviso
    if base_terco > 0:
        verbas.append(Verba(
            rubrica="TERCO_FERIAS",
            descricao="1/3 Constitucional de Férias",
            valor=base_terco / 3,
            tipo="provento",
            detalhes=DetalheCalculo(
                descricao="1/3 constitucional sobre o total de férias",
                formula="(Férias Vencidas + Férias Proporcionais + Férias Aviso) ÷ 3",
                valores={
                    "Férias Vencidas": ferias_vencidas,
                    "Férias Proporcionais": ferias_proporcionais,
                    "Férias Projeção Aviso": ferias_aviso,
                    "Base Total": base_terco,
                },
            ),
        ))

    # 12. Desconto do aviso não cumprido (pedido de demissão)
    if categoria.desconto_aviso and dados.desconto_aviso_dias > 0:
        verbas.append(Verba(
            rubrica=RUBRICA_DESCONTO_AVISO,
            descricao=f"Desconto Aviso Não Cumprido ({dados.desconto_aviso_dias} dias)",
            valor=(remuneracao / DIAS_MES) * dados.desconto_aviso_dias,
            tipo="desconto",
            detalhes=DetalheCalculo(
                descricao="Aviso prévio não cumprido pelo empregado (Art. 487, §2º CLT)",
                formula="(Salário + Médias) ÷ 30 × Dias não Cumpridos",
                valores={"Remuneração": remuneracao, "Dias": dados.desconto_aviso_dias},
            ),
        ))

    # 13. Indenização do Art. 479 (contrato a termo antecipado pelo empregador)
    if categoria.requer_data_termino:
        dias_restantes = max(0, calcular_dias_vinculo(dados.data_desligamento, dados.data_termino_contrato))
        if dias_restantes == 0:
            log.warning(
                f"Data de término do contrato ({dados.data_termino_contrato}) anterior ao desligamento; "
                "indenização do Art. 479 não devida."
            )
        else:
            verbas.append(Verba(
                rubrica="INDENIZACAO_ART_479",
                descricao=f"Indenização Art. 479 ({dias_restantes} dias)",
                valor=((remuneracao / DIAS_MES) * dias_restantes) * FATOR_INDENIZACAO_479,
                tipo="provento",
                detalhes=DetalheCalculo(
                    descricao="Metade da remuneração devida até o término do contrato",
                    formula="((Salário + Médias) ÷ 30 × Dias Restantes) × 50%",
                    valores={
                        "Remuneração": remuneracao,
                        "Término do Contrato": dados.data_termino_contrato.isoformat(),
                        "Dias Restantes": dias_restantes,
                    },
                ),
            ))

    # 14. Proventos e descontos não tributáveis
    for item in dados.verbas_nao_tributaveis:
        valor = calcular_valor_verba_nao_tributavel(item, dados, remuneracao)
        if valor <= 0:
            continue

        padrao = "Provento não tributável" if item.tipo == "provento" else "Desconto não tributável"
        detalhes = None
        if item.natureza == "percentual":
            detalhes = DetalheCalculo(
                descricao=f"{item.valor:g}% sobre a base '{item.base_tipo}'",
                formula="Base × Percentual ÷ 100",
                valores={
                    "Base": obter_base_nao_tributavel(item, dados, remuneracao),
                    "Percentual": f"{item.valor:g}%",
                },
            )

        verbas.append(Verba(
            rubrica=f"{item.tipo.upper()}_NAO_TRIBUTAVEL",
            descricao=item.descricao.strip() or padrao,
            valor=valor,
            tipo=item.tipo,
            detalhes=detalhes,
        ))

    # Retenções
    base_inss = _somar_base(verbas, "incide_inss")
    inss = calcular_inss(base_inss)
    base_irrf = _somar_base(verbas, "incide_irrf")
    irrf = calcular_irrf(base_irrf, dados.dependentes_irrf, inss)
    log.debug(f"Base INSS R$ {base_inss:.2f} -> INSS R$ {inss:.2f}")
    log.debug(f"Base IRRF R$ {base_irrf:.2f} -> IRRF R$ {irrf:.2f} ({dados.dependentes_irrf} dependentes)")

    # 15. Multa do FGTS
    multa_fgts = dados.saldo_fgts * categoria.multa_fgts
    if multa_fgts > 0:
        verbas.append(Verba(
            rubrica=RUBRICA_MULTA_FGTS,
            descricao=f"Multa FGTS ({categoria.multa_fgts * 100:.0f}%)",
            valor=multa_fgts,
            tipo="provento",
            detalhes=DetalheCalculo(
                descricao="Multa rescisória sobre o saldo do FGTS",
                formula="Saldo FGTS × Percentual da Categoria",
                valores={"Saldo FGTS": dados.saldo_fgts, "Percentual": f"{categoria.multa_fgts * 100:.0f}%"},
            ),
        ))

    total_proventos, total_descontos, liquido = _consolidar_totais(verbas, inss, irrf)

    resultado = ResultadoRescisao(
        motivo_codigo=motivo.codigo,
        motivo_descricao=motivo.descricao,
        categoria=motivo.categoria,
        verbas=verbas,
        total_proventos=total_proventos,
        total_descontos=total_descontos,
        liquido=liquido,
        inss=inss,
        irrf=irrf,
        base_inss=base_inss,
        base_irrf=base_irrf,
        multa_fgts=multa_fgts,
        dias_aviso=dias_aviso,
        dias_aviso_calculado=dias_aviso_calculado,
        dias_aviso_editado=dias_aviso_editado,
        avos_ferias=avos_ferias,
        avos_ferias_calculado=avos_ferias_calculado,
        avos_13=avos_13,
        avos_13_calculado=avos_13_calculado,
        anos_completos=anos_completos,
        dias_vinculo=dias_vinculo,
        meses_vinculo=meses_vinculo,
        tempo_servico=decompor_tempo_servico(dados.data_admissao, dados.data_desligamento),
        remuneracao_referencia=remuneracao,
        base_hora_extra=base_hora_extra,
        valor_hora=valor_hora,
        dsr_horas_extras=dsr_horas_extras,
        dsr_comissoes=dsr_comissoes,
        dsr_total=dsr_total,
        dsr_dias_uteis=dados.dsr_dias_uteis,
        dsr_dias_nao_uteis=dados.dsr_dias_nao_uteis,
        total_horas_extras=total_horas_extras,
        total_comissoes=dados.comissoes,
        total_variaveis=total_variaveis,
        observacoes=_gerar_observacoes(
            dados, motivo, dias_vinculo, remuneracao, multa_fgts, dias_aviso_editado
        ),
    )

    return aplicar_limite_desconto_aviso(resultado)

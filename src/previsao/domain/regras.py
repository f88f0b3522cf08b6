#previsao/domain/regras.py

DIAS_DA_SEMANA = {
    0: "Sunday",
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
}

MINIMO_FUNCIONARIOS = 5
LIMIAR_ALTO_MOVIMENTO = 40
LIMIAR_MOVIMENTO_MODERADO = 25


def determinar_periodo(hora: int) -> str:
    """Intervalos semiabertos: [6,12) manhã, [12,18) tarde, [18,24) noite, resto madrugada."""
    if 6 <= hora < 12:
        return "Morning"
    if 12 <= hora < 18:
        return "Afternoon"
    if 18 <= hora < 24:
        return "Night"
    return "Dawn"


def nome_dia_semana(dia: int) -> str:
    if dia not in DIAS_DA_SEMANA:
        raise ValueError(f"Dia da semana inválido: {dia} (esperado 0-6)")
    return DIAS_DA_SEMANA[dia]


def gerar_recomendacao(numero_funcionarios: int, dia_da_semana: int) -> str:
    dia = nome_dia_semana(dia_da_semana)
    if numero_funcionarios >= LIMIAR_ALTO_MOVIMENTO:
        return f"{dia}: high movement, recommend full staffing"
    if numero_funcionarios >= LIMIAR_MOVIMENTO_MODERADO:
        return f"{dia}: moderate movement, standard staffing"
    return f"{dia}: low movement, reduced staffing may suffice"


def aplicar_piso(numero_funcionarios: int) -> int:
    # negativo vira o piso (5), não zero
    if numero_funcionarios < 0:
        return MINIMO_FUNCIONARIOS
    return numero_funcionarios

from typing import Optional, Sequence

from app.schemas.scoring import (
    Prediction,
    PredictionPosition,
    RaceResultEntry,
    ScoringBreakdown,
    ScoringDetail,
)

POSITION_MISS_POINTS = -5
IN_TOP_TEN_POINTS = 2
CORRECT_WINNER_POINTS = 20
FASTEST_LAP_POINTS = 10
CORRECT_DNF_POINTS = 15

# |real - predicted| -> (type, points, label)
PROXIMITY_POINTS = {
    0: ("exact_position", 25, "Exact position match"),
    1: ("off_by_one", 15, "One position off"),
    2: ("off_by_two", 10, "Two positions off"),
    3: ("off_by_three", 5, "Three positions off"),
}

# (size, type, points, label). All of them can fire on the same bet.
PERFECT_ORDER_BONUSES = [
    (3, "perfect_podium", 30, "Perfect podium prediction"),
    (5, "perfect_top_5", 50, "Perfect top 5 prediction"),
    (10, "perfect_top_10", 100, "Perfect top 10 prediction"),
]


def build_result_maps(results: Sequence[RaceResultEntry]):
    """
    Devuelve ({driver_id: position | None}, {driver_ids con DNF}).
    """
    real_positions = {}
    dnf_drivers = set()

    for r in results:
        real_positions[r.driver_id] = r.position
        if r.dnf:
            dnf_drivers.add(r.driver_id)

    return real_positions, dnf_drivers


def score_position(pred: PredictionPosition, real_positions: dict) -> Optional[ScoringDetail]:
    """Puntos de una sola casilla de la predicción (None = no puntúa)."""
    if pred.driver_id not in real_positions:
        return ScoringDetail(
            type="position_miss",
            points=POSITION_MISS_POINTS,
            description=f"Driver not in top 10 at all: {POSITION_MISS_POINTS} points",
        )

    real_pos = real_positions[pred.driver_id]

    # DNF / unclassified is not penalised here
    if real_pos is None:
        return None

    diff = abs(real_pos - pred.position)

    if diff in PROXIMITY_POINTS:
        detail_type, points, label = PROXIMITY_POINTS[diff]
        return ScoringDetail(
            type=detail_type,
            points=points,
            description=f"{label} for position {pred.position}: +{points} points",
        )

    if real_pos <= 10:
        return ScoringDetail(
            type="in_top_ten",
            points=IN_TOP_TEN_POINTS,
            description=f"Driver in top 10 but wrong spot: +{IN_TOP_TEN_POINTS} points",
        )

    return None


def is_perfect_order(prediction_positions, results, size: int) -> bool:
    # sorted() is stable: duplicated positions keep the order they came in
    predicted = sorted(
        (p for p in prediction_positions if p.position <= size),
        key=lambda p: p.position,
    )
    real = sorted(
        (r for r in results if r.position is not None and r.position <= size),
        key=lambda r: r.position,
    )

    if len(predicted) != size or len(real) != size:
        return False

    return [p.driver_id for p in predicted] == [r.driver_id for r in real]


def get_winner(entries) -> Optional[str]:
    return next((e.driver_id for e in entries if e.position == 1), None)


def calculate_score(
    prediction: Prediction,
    results: Sequence[RaceResultEntry],
    fastest_lap_driver_id: Optional[str] = None,
) -> ScoringBreakdown:
    """
    Puntúa una apuesta contra el resultado oficial de la carrera.

    Orden de evaluación (y de `details`):
    1. Una entrada por posición predicha, en el orden recibido.
    2. Podio perfecto, top 5 perfecto, top 10 perfecto.
    3. Ganador, vuelta rápida y un bonus por cada DNF acertado.

    Los bonus se acumulan con los puntos por posición. Nunca lanza
    excepciones: una entrada vacía da 0 puntos.
    """
    real_positions, dnf_drivers = build_result_maps(results)
    details = []

    # 🏁 Posiciones
    for pred in prediction.positions:
        detail = score_position(pred, real_positions)
        if detail is not None:
            details.append(detail)

    # 🏆 Órdenes perfectos
    for size, detail_type, points, label in PERFECT_ORDER_BONUSES:
        if is_perfect_order(prediction.positions, results, size):
            details.append(ScoringDetail(
                type=detail_type,
                points=points,
                description=f"{label}: +{points} points",
            ))

    predicted_winner = get_winner(prediction.positions)
    real_winner = get_winner(results)
    if predicted_winner is not None and predicted_winner == real_winner:
        details.append(ScoringDetail(
            type="correct_winner",
            points=CORRECT_WINNER_POINTS,
            description=f"Correct race winner: +{CORRECT_WINNER_POINTS} points",
        ))

    # ⚡ Vuelta rápida
    if prediction.fastest_lap and prediction.fastest_lap == fastest_lap_driver_id:
        details.append(ScoringDetail(
            type="fastest_lap",
            points=FASTEST_LAP_POINTS,
            description=f"Correct fastest lap prediction: +{FASTEST_LAP_POINTS} points",
        ))

    # 💥 DNFs
    for driver_id in prediction.dnfs:
        if driver_id in dnf_drivers:
            details.append(ScoringDetail(
                type="correct_dnf",
                points=CORRECT_DNF_POINTS,
                description=f"Correct DNF prediction: +{CORRECT_DNF_POINTS} points",
            ))

    return ScoringBreakdown(
        total_score=sum(d.points for d in details),
        details=details,
    )

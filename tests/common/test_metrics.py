from src.common.metrics import OptimizationMetrics

def test_metrics_summary():
    metrics = OptimizationMetrics()
    assert metrics.best_score is None

    metrics.record_stage("init", 10, 0.5)
    metrics.record_stage("escalate", 15, 1.25)
    metrics.increment_passes()

    summary = metrics.to_dict()
    assert summary['best_score'] == 15
    assert summary['hill_climb_passes'] == 1
    assert summary['stages'][1] == {'stage': 'escalate', 'score': 15, 'seconds': 1.25}

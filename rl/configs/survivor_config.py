"""
Configuration for the survival game and its Gymnasium environment
"""

# Environment parameters
ENV_CONFIG = {
    "width": 800,
    "height": 800,
    "dt": 1/60,
    "duration": 300,
    "max_steps": None,  # defaults to one match length
    "k_enemies": 5,
    "m_orbs": 3,
    "b_bullets": 3,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG = {
    "name": "baseline",
    "description": "Kill and level rewards, damage penalty, survival bonus",
    "R_KILL": 1.0,       # Reward for killing an enemy
    "R_EXP": 0.01,       # Reward per experience point collected
    "R_LEVEL": 1.0,      # Reward per level gained
    "R_DAMAGE": 0.05,    # Penalty per health point lost
    "R_TIME": 0.001,     # Survival bonus per step
    "R_DEATH": 10.0,     # Loss penalty
    "R_WIN": 10.0,       # Bonus for surviving the full match
}

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "n_episodes": 5,
    "seed": 42,
    "policies": ["random", "idle"],
    "log_dir": "./logs",
}

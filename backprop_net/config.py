class Config:

    # =====================
    # Network
    # =====================
    input_size = 4
    output_size = 2
    hidden_count = 3

    # Delta rule
    learning_rate = 0.1

    # Initialisation
    seed = None             # None draws fresh weights every run

    # =====================
    # Training
    # =====================
    passes = 1000           # Full passes over the dataset
    log_state = False       # Log every node and edge after each step

    # =====================
    # Output
    # =====================
    log_path = "out/training.log"
    stats_path = "out/stats.csv"
    plot_path = None

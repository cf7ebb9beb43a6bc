from toroid_life.runner import SimConfig, build_field
from toroid_life.viewer import run_live

if __name__ == "__main__":
    # Gosper gun firing gliders across the torus; R = randomize, C = clear.
    cfg = SimConfig(width=70, height=30, pattern="gosper_glider_gun", fps=12)
    run_live(build_field(cfg), fps=cfg.fps, alive_probability=cfg.alive_probability)

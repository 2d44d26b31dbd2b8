tweak = {
    # Window settings
    "window_width": 1900,
    "window_height": 900,
    "window_title": "Blackjack",
    "target_fps": 60,
    "background_color": (21, 50, 30, 255),  # casino green

    # Card dimensions (cards are drawn centered on their position)
    "card_width": 135,
    "card_height": 196,
    "card_corner_radius": 12,
    "card_padding": 8,
    "card_hit_width": 150,
    "card_hit_height": 200,

    # Card colors
    "card_background": (255, 255, 255, 255),
    "card_border": (80, 80, 80, 255),
    "card_back": (60, 80, 120, 255),
    "card_back_pattern": (80, 100, 140, 255),
    "card_red_suit": (190, 20, 30, 255),
    "card_black_suit": (30, 30, 30, 255),
    "card_rank_font_size": 28,
    "card_center_font_size": 56,

    # Table layout
    "deck_position": (100.0, 160.0),
    "player_first_position": (100.0, 770.0),
    "dealer_first_position": (100.0, 475.0),
    "card_spacing": 170.0,
    "moving_card_step": 1.0 / 75.0,
    "flip_duration": 0.3,

    # Menu screen
    "menu_title_position": (750, 300),
    "menu_title_size": 60,
    "menu_play_position": (800, 500),
    "menu_help_position": (800, 700),
    "menu_button_size": 40,

    # Help screen
    "help_title_position": (800, 50),
    "help_title_size": 60,
    "help_description_position": (50, 200),
    "help_description_size": 30,
    "help_back_position": (1600, 800),
    "help_back_size": 40,

    # Clickable text buttons extend around their text
    "button_margin": 10,
    "button_width": 120,
    "button_height": 50,
    "button_hover_color": (255, 215, 0, 255),

    # HUD
    "player_score_label_position": (370, 50),
    "player_score_position": (450, 100),
    "dealer_score_label_position": (765, 50),
    "dealer_score_position": (850, 100),
    "score_label_size": 28,
    "score_size": 50,
    "power_ups_position": (1100, 50),
    "power_ups_size": 28,
    "wins_position": (1600, 50),
    "wins_size": 28,
    "hint_position": (50, 400),
    "hint_size": 35,
    "game_over_position": (620, 420),
    "game_over_size": 100,
    "text_color": (255, 255, 255, 255),
    "handicap_color": (204, 0, 0, 255),
    "win_color": (255, 163, 26, 255),
    "draw_color": (255, 255, 255, 255),
    "lose_color": (204, 0, 0, 255),

    # Round flow
    "seconds_till_game_over": 4.0,
    "seconds_till_menu": 3.0,
    "hint_range_size": 4,
}

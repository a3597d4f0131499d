import html


class LauncherPage:
    """
    Generate the HTML form shown in the launcher window.

    The page calls window.pywebview.api.launch(username, memory) when the
    launch button is pressed.
    """

    @staticmethod
    def render(
        username: str,
        memory: int,
        version: str = "",
        memory_min: int = 1,
        memory_max: int = 32,
        memory_tick: int = 8,
    ) -> str:
        """
        Generate the launcher form pre-filled with the stored values.

        Args:
            username: Username shown in the text field
            memory: Initial slider position in GB
            version: Optional version text displayed next to the title
            memory_min: Lowest selectable memory value
            memory_max: Highest selectable memory value
            memory_tick: Distance between slider labels

        Returns:
            HTML string for the launcher window
        """
        memory = max(memory_min, min(memory_max, memory))
        ticks = "\n".join(
            f'<option value="{value}" label="{value}"></option>'
            for value in LauncherPage.tick_values(memory_min, memory_max, memory_tick)
        )

        return f"""
        <!DOCTYPE html>
        <html>
        <head>
            <meta charset="UTF-8">
            <title>Factions Launcher</title>
            <style>
                * {{
                    margin: 0;
                    padding: 0;
                    box-sizing: border-box;
                }}

                body {{
                    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
                    background: linear-gradient(180deg, #b0c4de 0%, #e6e6f2 100%);
                    height: 100vh;
                    padding: 40px 25px;
                    color: #483d8b;
                }}

                h1 {{
                    font-size: 28px;
                    font-weight: 400;
                }}

                h1 .version {{
                    color: #f2f2ff;
                }}

                hr {{
                    border: none;
                    border-top: 1px solid #9aa8c7;
                    margin: 15px 0;
                }}

                label {{
                    display: block;
                    font-size: 12px;
                    margin-bottom: 8px;
                }}

                input[type=text] {{
                    width: 100%;
                    padding: 6px;
                    border: none;
                    border-radius: 6px;
                    background: #f0f8ff;
                }}

                input[type=range] {{
                    width: 100%;
                }}

                button {{
                    width: 100%;
                    padding: 8px;
                    border: none;
                    border-radius: 6px;
                    background: #4169e1;
                    color: #f5f5f5;
                    cursor: pointer;
                }}

                button:disabled {{
                    opacity: 0.6;
                    cursor: default;
                }}
            </style>
        </head>
        <body>
            <h1>Factions<span class="version"> {html.escape(version)}</span></h1>
            <hr>
            <label for="username">Username</label>
            <input type="text" id="username" value="{html.escape(username, quote=True)}">
            <hr>
            <label for="memory">Memory Allocation</label>
            <input type="range" id="memory" min="{memory_min}" max="{memory_max}"
                   step="1" value="{memory}" list="memory-ticks">
            <datalist id="memory-ticks">
                {ticks}
            </datalist>
            <p id="memory-amount">{memory} GB</p>
            <hr>
            <button id="launch">Launch Game</button>
            <script>
                var slider = document.getElementById('memory');
                var amount = document.getElementById('memory-amount');
                var button = document.getElementById('launch');

                slider.addEventListener('input', function() {{
                    amount.textContent = slider.value + ' GB';
                }});

                button.addEventListener('click', function() {{
                    button.disabled = true;
                    window.pywebview.api.launch(
                        document.getElementById('username').value,
                        parseInt(slider.value, 10)
                    );
                }});
            </script>
        </body>
        </html>
        """

    @staticmethod
    def tick_values(memory_min: int, memory_max: int, memory_tick: int) -> list:
        """
        Slider label positions: multiples of memory_tick plus both ends.
        """
        values = {memory_min, memory_max}
        if memory_tick > 0:
            values.update(
                value
                for value in range(0, memory_max + 1, memory_tick)
                if memory_min <= value <= memory_max
            )
        return sorted(values)

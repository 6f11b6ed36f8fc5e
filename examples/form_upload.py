"""
Example: Build a multipart/form-data upload body

Prints the headers and wire-format body for a form with one text field and
one file. Pass --base64 to send the file with a base64 transfer encoding.
"""

import click
from multipart_body import Part, Payload


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--field", default="description", help="Name of the text field.")
@click.option("--value", default="uploaded from multipart_body", help="Text field value.")
@click.option("--base64", "use_base64", is_flag=True, help="Base64-encode the file part.")
def main(path: str, field: str, value: str, use_base64: bool) -> None:
    payload = Payload({field: value})
    with open(path, "rb") as f:
        payload.parts.append(
            Part(
                "file",
                f,
                content_type="application/octet-stream",
                encoding="base64" if use_base64 else None,
            )
        )

    for name, header_value in payload.headers().items():
        click.secho(f"{name}: {header_value}", fg="green")
    click.echo()
    click.echo(payload.render().decode("utf-8", errors="replace"))


if __name__ == "__main__":
    main()

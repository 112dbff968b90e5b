"""Source templates for generated page files.

Every generator is a pure function returning the full text of one file.
Names are interpolated verbatim; nothing here checks that they are legal
TypeScript identifiers.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from .options import PageOptions

DEFAULT_COMPONENT_ALIAS = "@components/pages"


def generate_condition(options: PageOptions) -> str:
    name = options.page_name
    return f"""export const {name}Condition = () => {{
  return (
    <form onSubmit={{(e) => {{
      e.preventDefault();
      // TODO: implement search logic
    }}}}>
       <button
          type="submit"
          className="ml-auto rounded bg-blue-500 px-4 py-2 text-white hover:bg-blue-600"
        >
          Search
        </button>
    </form>
  );
}};
"""


def generate_component(options: PageOptions, has_search_condition: bool) -> str:
    name = options.page_name
    import_line = (
        f"\nimport {{ {name}Condition }} from './{name}Condition';"
        if has_search_condition
        else ""
    )
    condition_block = (
        f"""<div>
        <{name}Condition />
      </div>"""
        if has_search_condition
        else ""
    )
    return f"""{import_line}

export const {name}Component = () => {{
  return (
    <div>
      {condition_block}
    </div>
  );
}};
"""


def generate_view_model(options: PageOptions) -> str:
    name = options.page_name
    return f"""import {{ createContext }} from 'react';

interface I{name}ViewModel {{
  // TODO: define the view-model interface
}}

export const {name}ViewModel = createContext<I{name}ViewModel | undefined>(
  undefined,
);

interface Props {{
  children: React.ReactNode;
}}

export const {name}ViewModelProvider = ({{ children }}: Props) => {{
  return (
    <{name}ViewModel.Provider
      value={{{{
        // TODO: provide view-model values
      }}}}
    >
      {{children}}
    </{name}ViewModel.Provider>
  );
}};
"""


def generate_page(
    options: PageOptions, component_alias: str = DEFAULT_COMPONENT_ALIAS
) -> str:
    name = options.page_name
    module = (
        f"{component_alias}/{options.page_path}" if options.page_path else component_alias
    )
    return f"""import {{
  {name}Component,
  {name}ViewModelProvider,
}} from '{module}';

export const {name}Page = () => {{
  return (
    <{name}ViewModelProvider>
      <{name}Component />
    </{name}ViewModelProvider>
  );
}};
"""


def generate_component_index(options: PageOptions) -> str:
    return (
        f"export * from './{options.page_name}Component';\n"
        f"export * from './{options.page_name}ViewModel';\n"
    )


def generate_page_index(options: PageOptions) -> str:
    return f"export * from './{options.page_name}Page';\n"


def generate_model_index(options: PageOptions) -> str:
    """Barrel for the optional model and hooks directories; starts out empty."""
    return ""


def generate_parent_index(child_path: str) -> str:
    child_name = PurePosixPath(child_path).name
    return f"export * from './{child_name}';\n"
